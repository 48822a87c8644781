"""Schema package

Structured results returned by the tools. Field aliases are the camelCase
names clients see in the JSON payloads.
"""

from .response_schemas import (
    TemplateInfo,
    ProjectProfile,
    OutdatedFile,
    ComparisonSummary,
    ComparisonReport,
    TemplateFileListing
)

__all__ = [
    'TemplateInfo',
    'ProjectProfile',
    'OutdatedFile',
    'ComparisonSummary',
    'ComparisonReport',
    'TemplateFileListing'
]
