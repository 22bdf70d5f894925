"""Core enums for kkp-presets."""

from enum import Enum


class ProviderKind(str, Enum):
    """Cloud provider a preset holds credentials for."""

    AWS = "aws"
    EKS = "eks"
    AKS = "aks"
    GKE = "gke"
    AZURE = "azure"
    GCP = "gcp"
    OPENSTACK = "openstack"
    HETZNER = "hetzner"
    DIGITALOCEAN = "digitalocean"
