"""EKS credential preset."""

from kkp_presets.codec.json_codec import WireKeys
from kkp_presets.models.base import PROVIDER_WIRE_KEYS, ProviderPreset, wire_config

# Encoded in this key order.
EKS_WIRE_KEYS = WireKeys(
    {
        "access_key_id": "accessKeyID",
        "assume_role_arn": "assumeRoleARN",
        "assume_role_external_id": "assumeRoleExternalID",
        "datacenter": PROVIDER_WIRE_KEYS["datacenter"],
        "enabled": PROVIDER_WIRE_KEYS["enabled"],
        "is_customizable": PROVIDER_WIRE_KEYS["is_customizable"],
        "secret_access_key": "secretAccessKey",
    }
)


class EKS(ProviderPreset):
    """AWS credentials for provisioning EKS-backed clusters.

    Wire format (all keys optional, omitted when zero-valued)::

        {
          "accessKeyID": "...",
          "assumeRoleARN": "...",
          "assumeRoleExternalID": "...",
          "datacenter": "...",
          "enabled": true,
          "isCutomizable": true,
          "secretAccessKey": "..."
        }
    """

    model_config = wire_config(EKS_WIRE_KEYS)

    access_key_id: str = ""
    """Access key ID used to authenticate against AWS."""

    assume_role_arn: str = ""
    """ARN of an IAM role to assume via STS AssumeRole when handling AWS resources."""

    assume_role_external_id: str = ""
    """External ID passed to STS AssumeRole, mitigating the confused deputy problem."""

    secret_access_key: str = ""
    """Secret access key used to authenticate against AWS."""
