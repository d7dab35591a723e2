from django.db import models
from apps.api.common.models import BaseModel


class Section(BaseModel):
    """
    Class section grouping StudentProfiles.
    """

    name = models.CharField(max_length=150, unique=True)
    description = models.TextField(blank=True, null=True)

    class Meta:
        db_table = "sections_section"
        ordering = ["-id"]

    def __str__(self):
        return self.name
