"""Provider credential preset models."""

from kkp_presets.models.base import PROVIDER_WIRE_KEYS, ProviderPreset
from kkp_presets.models.eks import EKS
from kkp_presets.models.providers import AKS, AWS, GCP, GKE, Azure, Digitalocean, Hetzner, Openstack

__all__ = [
    "PROVIDER_WIRE_KEYS",
    "ProviderPreset",
    "EKS",
    "AWS",
    "AKS",
    "Azure",
    "GCP",
    "GKE",
    "Openstack",
    "Hetzner",
    "Digitalocean",
]
