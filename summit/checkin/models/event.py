from django.db import models
from .mixins import TimeStampedModel


class Event(TimeStampedModel):
    name = models.CharField(max_length=200)
    venue = models.CharField(max_length=200, blank=True, default="")
    description = models.TextField(blank=True, default="")
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    # Only one event is expected to be active; not enforced by a constraint.
    is_active = models.BooleanField(default=False, db_index=True)

    class Meta:
        db_table = "Event"
        ordering = ["-start_date"]

    def __str__(self):
        return f"{self.name} ({self.start_date:%Y-%m-%d})"
