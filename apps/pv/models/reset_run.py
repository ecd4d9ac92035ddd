from django.db import models
from django.utils import timezone


class PVResetRun(models.Model):
    """Progress of the month-end reset for one period; doubles as a resume cursor"""
    RUNNING = 'running'
    COMPLETED = 'completed'
    PARTIAL = 'partial'
    EARLY = 'early'

    STATUS_CHOICES = [
        (RUNNING, 'Running'),
        (COMPLETED, 'Completed'),
        (PARTIAL, 'Partially completed'),
        (EARLY, 'Reset early, period still open'),
    ]

    period = models.CharField(max_length=7, unique=True, help_text="Month being closed, YYYY-MM")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=RUNNING)
    cutoff = models.DateTimeField(help_text="Accruals after this instant belong to the next cycle")
    last_user_id = models.BigIntegerField(default=0)
    users_reset = models.PositiveIntegerField(default=0)
    failed_user_ids = models.JSONField(default=list, blank=True)
    started_at = models.DateTimeField(default=timezone.now)
    finished_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'pv_reset_runs'
        ordering = ['-period']
        verbose_name = 'PV Reset Run'
        verbose_name_plural = 'PV Reset Runs'

    def __str__(self):
        return f"PV reset {self.period} ({self.status})"

    @property
    def is_completed(self):
        return self.status == self.COMPLETED
