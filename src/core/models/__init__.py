"""
Domain models — Pydantic types for docktool.

All models are re-exported here for convenient access:

    from src.core.models import BuildConfiguration, Ecosystem, GeneratedFile
"""

from src.core.models.build import BuildConfiguration, Ecosystem, Profile
from src.core.models.template import GeneratedFile
from src.core.models.tool import ToolConfig

__all__ = [
    # build.py
    "BuildConfiguration",
    "Ecosystem",
    # template.py
    "GeneratedFile",
    "Profile",
    # tool.py
    "ToolConfig",
]
