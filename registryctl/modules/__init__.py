"""
Registry provisioning modules.
"""
from .models import RegistryRequest, RegistrySettings, PipelineReport
from .pipeline import provision_registry

__all__ = [
    'RegistryRequest',
    'RegistrySettings',
    'PipelineReport',
    'provision_registry',
]
