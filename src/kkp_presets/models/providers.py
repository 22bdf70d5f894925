"""Credential presets for the remaining cloud providers.

Each preset carries the shared ``datacenter``/``enabled``/``isCutomizable``
fields plus the provider's own credentials and settings. None of them
define validation rules.
"""

from kkp_presets.models.base import PROVIDER_WIRE_KEYS, ProviderPreset, wire_config

AWS_WIRE_KEYS = PROVIDER_WIRE_KEYS.extend(
    {
        "access_key_id": "accessKeyID",
        "secret_access_key": "secretAccessKey",
        "assume_role_arn": "assumeRoleARN",
        "assume_role_external_id": "assumeRoleExternalID",
        "vpc_id": "vpcID",
        "route_table_id": "routeTableID",
        "instance_profile_name": "instanceProfileName",
        "security_group_id": "securityGroupID",
        "control_plane_role_arn": "roleARN",
    }
)

AKS_WIRE_KEYS = PROVIDER_WIRE_KEYS.extend(
    {
        "tenant_id": "tenantID",
        "subscription_id": "subscriptionID",
        "client_id": "clientID",
        "client_secret": "clientSecret",
    }
)

AZURE_WIRE_KEYS = AKS_WIRE_KEYS.extend(
    {
        "resource_group": "resourceGroup",
        "vnet_resource_group": "vnetResourceGroup",
        "vnet": "vnet",
        "subnet": "subnet",
        "route_table": "routeTable",
        "security_group": "securityGroup",
        "load_balancer_sku": "loadBalancerSKU",
    }
)

GKE_WIRE_KEYS = PROVIDER_WIRE_KEYS.extend({"service_account": "serviceAccount"})

GCP_WIRE_KEYS = GKE_WIRE_KEYS.extend(
    {
        "network": "network",
        "subnetwork": "subnetwork",
    }
)

OPENSTACK_WIRE_KEYS = PROVIDER_WIRE_KEYS.extend(
    {
        "use_token": "useToken",
        "application_credential_id": "applicationCredentialID",
        "application_credential_secret": "applicationCredentialSecret",
        "username": "username",
        "password": "password",
        "project": "project",
        "project_id": "projectID",
        "domain": "domain",
        "network": "network",
        "security_groups": "securityGroups",
        "floating_ip_pool": "floatingIPPool",
        "router_id": "routerID",
        "subnet_id": "subnetID",
    }
)

HETZNER_WIRE_KEYS = PROVIDER_WIRE_KEYS.extend(
    {
        "token": "token",
        "network": "network",
    }
)

DIGITALOCEAN_WIRE_KEYS = PROVIDER_WIRE_KEYS.extend({"token": "token"})


class AWS(ProviderPreset):
    """AWS credentials and network settings for self-managed clusters."""

    model_config = wire_config(AWS_WIRE_KEYS)

    access_key_id: str = ""
    secret_access_key: str = ""
    assume_role_arn: str = ""
    assume_role_external_id: str = ""
    vpc_id: str = ""
    route_table_id: str = ""
    instance_profile_name: str = ""
    security_group_id: str = ""
    control_plane_role_arn: str = ""


class AKS(ProviderPreset):
    """Azure service principal for AKS clusters."""

    model_config = wire_config(AKS_WIRE_KEYS)

    tenant_id: str = ""
    subscription_id: str = ""
    client_id: str = ""
    client_secret: str = ""


class Azure(ProviderPreset):
    """Azure service principal and network settings."""

    model_config = wire_config(AZURE_WIRE_KEYS)

    tenant_id: str = ""
    subscription_id: str = ""
    client_id: str = ""
    client_secret: str = ""
    resource_group: str = ""
    vnet_resource_group: str = ""
    vnet: str = ""
    subnet: str = ""
    route_table: str = ""
    security_group: str = ""
    load_balancer_sku: str = ""


class GKE(ProviderPreset):
    """Base64-encoded GCP service account for GKE clusters."""

    model_config = wire_config(GKE_WIRE_KEYS)

    service_account: str = ""


class GCP(ProviderPreset):
    """Base64-encoded GCP service account and network settings."""

    model_config = wire_config(GCP_WIRE_KEYS)

    service_account: str = ""
    network: str = ""
    subnetwork: str = ""


class Openstack(ProviderPreset):
    """OpenStack credentials.

    Either username/password with a project, or an application credential.
    With ``use_token`` the user's own OpenStack token is used instead.
    """

    model_config = wire_config(OPENSTACK_WIRE_KEYS)

    use_token: bool = False
    application_credential_id: str = ""
    application_credential_secret: str = ""
    username: str = ""
    password: str = ""
    project: str = ""
    project_id: str = ""
    domain: str = ""
    network: str = ""
    security_groups: str = ""
    floating_ip_pool: str = ""
    router_id: str = ""
    subnet_id: str = ""


class Hetzner(ProviderPreset):
    """Hetzner Cloud API token."""

    model_config = wire_config(HETZNER_WIRE_KEYS)

    token: str = ""
    network: str = ""


class Digitalocean(ProviderPreset):
    """DigitalOcean API token."""

    model_config = wire_config(DIGITALOCEAN_WIRE_KEYS)

    token: str = ""
