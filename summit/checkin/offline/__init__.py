"""Client-side pieces for security staff devices: connectivity flag, offline queue, API client."""
from .connectivity import ConnectivityMonitor, ONLINE, OFFLINE
from .store import OfflineQueue, OfflineRecord, PENDING_SYNC
from .transport import HttpVerificationTransport, TransportError
from .client import VerificationClient, SubmissionResult

__all__ = [
    "ConnectivityMonitor", "ONLINE", "OFFLINE",
    "OfflineQueue", "OfflineRecord", "PENDING_SYNC",
    "HttpVerificationTransport", "TransportError",
    "VerificationClient", "SubmissionResult",
]
