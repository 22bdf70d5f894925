"""KKP credential presets (kkp-presets).

Data-transfer objects for the cloud-provider credential presets of the
Kubermatic cluster-management API, with their JSON wire encoding.
"""

__version__ = "0.1.0"
__author__ = "Platform Engineering Team"
__license__ = "Apache-2.0"
