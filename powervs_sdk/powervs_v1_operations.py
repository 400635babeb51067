"""Operation catalog for the PowerVS V1 API.

Body parameter tokens use the JSON member names of the API; the Python
keyword is their snake-case form unless given explicitly as ``wire=name``.
A trailing ``*`` marks a required option and a leading ``@`` an option
that is sent as the whole request body.
"""

from __future__ import annotations

from .operations import Operation, ResultKind

ARRAY = ResultKind.ARRAY
NONE = ResultKind.NONE

_op = Operation.define

CI = "/pcloud/v1/cloud-instances/{cloud_instance_id}"
CI2 = "/pcloud/v2/cloud-instances/{cloud_instance_id}"
PVM = CI + "/pvm-instances/{pvm_instance_id}"
VPN = CI + "/vpn/vpn-connections"
OSB_INSTANCE = "/v2/service_instances/{instance_id}"
OSB_BINDING = OSB_INSTANCE + "/service_bindings/{binding_id}"
OSB_HEADERS = ("X-Broker-API-Version*", "X-Broker-API-Originating-Identity")

_CAPTURE_BODY = (
    "captureDestination*", "captureName*", "captureVolumeIDs", "cloudStorageAccessKey",
    "cloudStorageImagePath", "cloudStorageRegion", "cloudStorageSecretKey",
)
_EXPORT_BODY = ("bucketName*", "region*", "accessKey*", "secretKey")
_VOLUME_CREATE_BODY = (
    "name*", "size*", "affinityPVMInstance", "affinityPolicy", "affinityVolume",
    "antiAffinityPVMInstances", "antiAffinityVolumes", "diskType", "replicationEnabled",
    "shareable", "volumePool",
)


SERVICE_BROKER_AUTH = (
    _op("ServiceBrokerAuthCallback", "GET", "/auth/v1/callback",
        summary="Returns an accessToken (and set cookie)"),
    _op("ServiceBrokerAuthRegistrationCallback", "GET", "/auth/v1/callback-registration",
        summary="Associates the user with a tenant and returns an accessToken"),
    _op("ServiceBrokerAuthDeviceCodePost", "POST", "/auth/v1/device/code",
        summary="Request a authorization device code"),
    _op("ServiceBrokerAuthDeviceTokenPost", "POST", "/auth/v1/device/token",
        body=("deviceCode*",),
        summary="Poll for authorization device token"),
    _op("ServiceBrokerAuthInfoToken", "GET", "/auth/v1/info/token",
        summary="Information about current access token"),
    _op("ServiceBrokerAuthInfoUser", "GET", "/auth/v1/info/user",
        summary="Information about current user"),
    _op("ServiceBrokerAuthLogin", "GET", "/auth/v1/login",
        query=("user_id", "redirect_url", "access_type"),
        summary="Login"),
    _op("ServiceBrokerAuthLogout", "GET", "/auth/v1/logout",
        summary="Logout"),
    _op("ServiceBrokerAuthRegistration", "GET", "/auth/v1/registration",
        query=("tenant_id*", "entitlement_id", "plan", "icn", "regions", "redirect_url"),
        summary="Registration of a new Tenant and Login"),
    _op("ServiceBrokerAuthTokenPost", "POST", "/auth/v1/token",
        body=("refresh_token*", "source"),
        summary="Request a new token from a refresh token"),
)

SERVICE_BROKER = (
    _op("BluemixServiceInstanceGet", "GET", "/bluemix_v1/service_instances/{instance_id}",
        summary="Get the current state information associated with the service instance"),
    _op("BluemixServiceInstancePut", "PUT", "/bluemix_v1/service_instances/{instance_id}",
        body=("enabled*", "initiator_id", "reason_code"),
        summary="Update (disable or enable) the state of a provisioned service instance"),
    _op("CatalogGet", "GET", "/v2/catalog",
        headers=("X-Broker-API-Version*",),
        summary="Get the catalog of services that the service broker offers"),
    _op("ServiceBrokerHardwareplatformsGet", "GET", "/broker/v1/hardware-platforms",
        query=("regionZone",),
        summary="Available hardware statistics and limits"),
    _op("ServiceBrokerHealthHead", "HEAD", "/broker/v1/health", result=NONE,
        summary="Get current server health"),
    _op("ServiceBrokerHealth", "GET", "/broker/v1/health",
        summary="Get current server health"),
    _op("ServiceBrokerTestTimeout", "GET", "/broker/v1/test/timeout",
        query=("t*",),
        summary="Test a request that takes t seconds to answer"),
    _op("ServiceBrokerVersion", "GET", "/broker/v1/version",
        summary="Get current server version"),
    _op("ServiceBrokerStoragetypesGet", "GET", "/broker/v1/storage-types",
        summary="Available storage types in a region"),
    _op("ServiceBrokerSwaggerspec", "GET", "/v1/swagger.json",
        summary="Get swagger json spec"),
    _op("ServiceBrokerOpenstacksGet", "GET", "/broker/v1/openstacks",
        summary="List all OpenStack instances being managed"),
    _op("ServiceBrokerOpenstacksPost", "POST", "/broker/v1/openstacks",
        body=("ipAddress*", "name*", "region*"),
        summary="Create a new OpenStack instance to be managed"),
    _op("ServiceBrokerOpenstacksOpenstackGet", "GET", "/broker/v1/openstacks/{openstack_id}",
        summary="List account information for all pvm instances on hostname"),
    _op("ServiceBrokerOpenstacksHostsGet", "GET", "/broker/v1/openstacks/{openstack_id}/hosts/{hostname}",
        summary="List account information for all pvm instances on hostname"),
    _op("ServiceBrokerOpenstacksServersGet", "GET",
        "/broker/v1/openstacks/{openstack_id}/servers/{pvm_instance_id}",
        summary="List account information for a pvm instance"),
)

INTERNAL = (
    _op("InternalV1PowervsInstancesGet", "GET", "/internal/v1/powervs/instances",
        query=("powervs_location*",),
        summary="Get List of PowerVS Cloud Instances"),
    _op("InternalV1PowervsLocationsTransitgatewayGet", "GET", "/internal/v1/powervs/locations/transit-gateway",
        summary="Get List of PER enabled PowerVS Locations"),
    _op("InternalV1StorageRegionsStoragePoolsGetall", "GET",
        "/internal/v1/storage/regions/{region_zone_id}/storage-pools", result=ARRAY,
        summary="Get the current storage pools settings for a region-zone"),
    _op("InternalV1StorageRegionsStoragePoolsGet", "GET",
        "/internal/v1/storage/regions/{region_zone_id}/storage-pools/{storage_pool_name}",
        summary="Get the settings for given pool name"),
    _op("InternalV1StorageRegionsStoragePoolsPut", "PUT",
        "/internal/v1/storage/regions/{region_zone_id}/storage-pools/{storage_pool_name}",
        body=("displayName", "drEnabled", "overrideThresholds", "state"),
        summary="Update the settings for given pool name"),
    _op("InternalV1StorageRegionsThresholdsGet", "GET", "/internal/v1/storage/regions/{region_zone_id}/thresholds",
        summary="Get the current default threshold settings for a region-zone"),
    _op("InternalV1StorageRegionsThresholdsPut", "PUT", "/internal/v1/storage/regions/{region_zone_id}/thresholds",
        body=("capacity", "overcommit", "physicalCapacity", "vdiskCapacity", "vdiskLimit"), status=202,
        summary="Update a default threshold setting for a region-zone"),
    _op("InternalV1TransitgatewayGet", "GET", "/internal/v1/transit-gateway/{powervs_service_crn}",
        headers=("IBM-UserAuthorization*",),
        summary="Get the Cloud Instance Transit Gateway information"),
)

CLOUD_CONNECTIONS = (
    _op("PcloudCloudconnectionsGetall", "GET", CI + "/cloud-connections",
        summary="Get all cloud connections in this cloud instance"),
    _op("PcloudCloudconnectionsPost", "POST", CI + "/cloud-connections",
        body=("name*", "speed*", "classic", "globalRouting", "metered", "subnets", "transitEnabled", "vpc"),
        summary="Create a new cloud connection"),
    _op("PcloudCloudconnectionsVirtualprivatecloudsGetall", "GET", CI + "/cloud-connections-virtual-private-clouds",
        summary="Get all virtual private cloud connections in this cloud instance"),
    _op("PcloudCloudconnectionsGet", "GET", CI + "/cloud-connections/{cloud_connection_id}",
        summary="Get a cloud connection's state/information"),
    _op("PcloudCloudconnectionsPut", "PUT", CI + "/cloud-connections/{cloud_connection_id}",
        body=("classic", "globalRouting", "metered", "name", "speed", "vpc"),
        summary="Update a Cloud Connection"),
    _op("PcloudCloudconnectionsDelete", "DELETE", CI + "/cloud-connections/{cloud_connection_id}",
        summary="Delete a Cloud Connection"),
    _op("PcloudCloudconnectionsNetworksPut", "PUT", CI + "/cloud-connections/{cloud_connection_id}/networks/{network_id}",
        summary="Attach a network to the cloud connection"),
    _op("PcloudCloudconnectionsNetworksDelete", "DELETE",
        CI + "/cloud-connections/{cloud_connection_id}/networks/{network_id}",
        summary="Detach a network from a Cloud Connection"),
)

LOCATIONS_AND_EVENTS = (
    _op("PcloudLocationsDisasterrecoveryGet", "GET", CI + "/locations/disaster-recovery",
        summary="Get the disaster recovery site details for the current location"),
    _op("PcloudLocationsDisasterrecoveryGetall", "GET", "/pcloud/v1/locations/disaster-recovery",
        summary="Get all disaster recovery locations supported by Power Virtual Server"),
    _op("PcloudEventsGetquery", "GET", CI + "/events",
        query=("time", "from_time", "to_time"), headers=("Accept-Language",),
        summary="Get events from this cloud instance since a specific timestamp"),
    _op("PcloudEventsGet", "GET", CI + "/events/{event_id}",
        headers=("Accept-Language",),
        summary="Get a single event"),
)

IMAGES = (
    _op("PcloudV1CloudinstancesCosimagesGet", "GET", CI + "/cos-images",
        summary="Get detail of last cos-image import job"),
    _op("PcloudV1CloudinstancesCosimagesPost", "POST", CI + "/cos-images",
        body=("bucketName*", "imageFilename*", "imageName*", "region*", "accessKey", "bucketAccess",
              "osType", "secretKey", "storageAffinity", "storagePool", "storageType"),
        status=202,
        summary="Create an cos-image import job"),
    _op("PcloudCloudinstancesImagesGetall", "GET", CI + "/images",
        summary="List all images for this cloud instance"),
    _op("PcloudCloudinstancesImagesPost", "POST", CI + "/images",
        body=("source*", "accessKey", "bucketName", "diskType", "imageFilename", "imageID", "imageName",
              "imagePath", "osType", "region", "secretKey", "storageAffinity", "storagePool"),
        summary="Create a new Image (from available images)"),
    _op("PcloudCloudinstancesImagesGet", "GET", CI + "/images/{image_id}",
        summary="Detailed info of an image"),
    _op("PcloudCloudinstancesImagesDelete", "DELETE", CI + "/images/{image_id}",
        summary="Delete an Image from a Cloud Instance"),
    _op("PcloudCloudinstancesImagesExportPost", "POST", CI + "/images/{image_id}/export",
        body=_EXPORT_BODY, status=202,
        summary="Export an image"),
    _op("PcloudCloudinstancesStockimagesGetall", "GET", CI + "/stock-images",
        query=("sap", "vtl"),
        summary="List all available stock images"),
    _op("PcloudCloudinstancesStockimagesGet", "GET", CI + "/stock-images/{image_id}",
        summary="Detailed info of an available stock image"),
    _op("PcloudImagesGetall", "GET", "/pcloud/v1/images",
        query=("sap", "vtl"),
        summary="List all the images in the image-catalog"),
    _op("PcloudImagesGet", "GET", "/pcloud/v1/images/{image_id}",
        summary="Detailed info of an image in the image-catalog"),
    _op("PcloudV2ImagesExportGet", "GET", CI2 + "/images/{image_id}/export",
        summary="Get detail of last image export job"),
    _op("PcloudV2ImagesExportPost", "POST", CI2 + "/images/{image_id}/export",
        body=_EXPORT_BODY, status=202,
        summary="Add image export job to the jobs queue"),
)

CLOUD_INSTANCES = (
    _op("PcloudCloudinstancesGet", "GET", CI,
        summary="Get a Cloud Instance's current state/information"),
    _op("PcloudCloudinstancesPut", "PUT", CI,
        body=("instances", "memory", "procUnits", "processors", "storage"),
        summary="Update / Upgrade a Cloud Instance"),
    _op("PcloudCloudinstancesDelete", "DELETE", CI,
        summary="Delete a Power Cloud Instance"),
    _op("PcloudCloudinstancesJobsGetall", "GET", CI + "/jobs",
        query=("operation.id=operation_id", "operation.target=operation_target",
               "operation.action=operation_action"),
        summary="List up to the last 5 jobs initiated by the cloud instance"),
    _op("PcloudCloudinstancesJobsGet", "GET", CI + "/jobs/{job_id}",
        summary="List the detail of a job"),
    _op("PcloudCloudinstancesJobsDelete", "DELETE", CI + "/jobs/{job_id}",
        summary="Delete a cloud instance job"),
)

NETWORKS = (
    _op("PcloudNetworksGetall", "GET", CI + "/networks",
        query=("filter",),
        summary="Get all networks in this cloud instance"),
    _op("PcloudNetworksPost", "POST", CI + "/networks",
        body=("type*", "cidr", "dnsServers", "gateway", "ipAddressRanges", "jumbo", "name"),
        summary="Create a new Network"),
    _op("PcloudNetworksGet", "GET", CI + "/networks/{network_id}",
        summary="Get a network's current state/information"),
    _op("PcloudNetworksPut", "PUT", CI + "/networks/{network_id}",
        body=("dnsServers", "gateway", "ipAddressRanges", "name"),
        summary="Update a Network"),
    _op("PcloudNetworksDelete", "DELETE", CI + "/networks/{network_id}",
        summary="Delete a Network"),
    _op("PcloudNetworksPortsGetall", "GET", CI + "/networks/{network_id}/ports",
        summary="Get all ports for this network"),
    _op("PcloudNetworksPortsPost", "POST", CI + "/networks/{network_id}/ports",
        body=("description", "ipAddress"), status=201,
        summary="Perform port addition, deletion, and listing"),
    _op("PcloudNetworksPortsGet", "GET", CI + "/networks/{network_id}/ports/{port_id}",
        headers=("Accept",),
        summary="Get a port's information"),
    _op("PcloudNetworksPortsPut", "PUT", CI + "/networks/{network_id}/ports/{port_id}",
        body=("description", "pvmInstanceID"),
        summary="Update a port's information"),
    _op("PcloudNetworksPortsDelete", "DELETE", CI + "/networks/{network_id}/ports/{port_id}",
        summary="Delete a Network Port"),
)

PVM_INSTANCES = (
    _op("PcloudPvminstancesGetall", "GET", CI + "/pvm-instances",
        summary="Get all the pvm instances for this cloud instance"),
    _op("PcloudPvminstancesPost", "POST", CI + "/pvm-instances",
        query=("skipHostValidation",),
        body=("imageID*", "memory*", "procType*", "processors*", "serverName*", "deploymentType",
              "keyPairName", "licenseRepositoryCapacity", "migratable", "networkIDs", "networks",
              "pinPolicy", "placementGroup", "replicantAffinityPolicy", "replicantNamingScheme",
              "replicants", "sharedProcessorPool", "softwareLicenses", "storageAffinity",
              "storageConnection", "storagePool", "storageType", "sysType", "userData",
              "virtualCores", "volumeIDs"),
        result=ARRAY,
        summary="Create a new Power VM Instance"),
    _op("PcloudPvminstancesGet", "GET", PVM,
        summary="Get a PVM Instance's current state or information"),
    _op("PcloudPvminstancesPut", "PUT", PVM,
        body=("licenseRepositoryCapacity", "memory", "migratable", "pinPolicy", "procType", "processors",
              "sapProfileID", "serverName", "softwareLicenses", "storagePoolAffinity", "virtualCores"),
        status=202,
        summary="Update a PCloud PVM Instance"),
    _op("PcloudPvminstancesDelete", "DELETE", PVM,
        query=("delete_data_volumes",),
        summary="Delete a PCloud PVM Instance"),
    _op("PcloudPvminstancesActionPost", "POST", PVM + "/action",
        body=("action*",),
        summary="Perform an action (start stop reboot immediate-shutdown reset) on a PVMInstance"),
    _op("PcloudPvminstancesCapturePost", "POST", PVM + "/capture",
        body=_CAPTURE_BODY,
        summary="Capture a PVMInstance and create a deployable image"),
    _op("PcloudPvminstancesClonePost", "POST", PVM + "/clone",
        body=("name*", "networks*", "keyPairName", "memory", "procType", "processors",
              "softwareLicenses", "volumeIDs"),
        status=202,
        summary="Clone a PVMInstance"),
    _op("PcloudPvminstancesConsoleGet", "GET", PVM + "/console",
        summary="List all console languages"),
    _op("PcloudPvminstancesConsolePost", "POST", PVM + "/console", status=201,
        summary="Generate the noVNC Console URL"),
    _op("PcloudPvminstancesConsolePut", "PUT", PVM + "/console",
        body=("code*", "language"),
        summary="Update PVMInstance console laguage code"),
    _op("PcloudPvminstancesNetworksGetall", "GET", PVM + "/networks",
        summary="Get all networks for this PVM Instance"),
    _op("PcloudPvminstancesNetworksPost", "POST", PVM + "/networks",
        body=("networkID*", "ipAddress"), status=201,
        summary="Perform network addition"),
    _op("PcloudPvminstancesNetworksGet", "GET", PVM + "/networks/{network_id}",
        summary="Get a PVM Instance's network information"),
    _op("PcloudPvminstancesNetworksDelete", "DELETE", PVM + "/networks/{network_id}",
        body=("macAddress",),
        summary="Remove all Address of Network from a PVM Instance"),
    _op("PcloudPvminstancesOperationsPost", "POST", PVM + "/operations",
        body=("operation*", "operationType*"),
        summary="Perform an operation on a PVMInstance"),
    _op("PcloudPvminstancesSnapshotsGetall", "GET", PVM + "/snapshots",
        summary="Get all snapshots for this PVM Instance"),
    _op("PcloudPvminstancesSnapshotsPost", "POST", PVM + "/snapshots",
        body=("name*", "description", "performancePath", "volumeIDs"), status=202,
        summary="Create a PVM Instance snapshot"),
    _op("PcloudPvminstancesSnapshotsRestorePost", "POST", PVM + "/snapshots/{snapshot_id}/restore",
        query=("restore_fail_action",), body=("force",), status=202,
        summary="Restore a PVM Instance snapshot"),
    _op("PcloudV2PvminstancesGetall", "GET", CI2 + "/pvm-instances",
        summary="Get all the pvm instances for this cloud instance"),
    _op("PcloudV2PvminstancesCaptureGet", "GET", CI2 + "/pvm-instances/{pvm_instance_id}/capture",
        summary="Get detail of last capture job"),
    _op("PcloudV2PvminstancesCapturePost", "POST", CI2 + "/pvm-instances/{pvm_instance_id}/capture",
        body=_CAPTURE_BODY, status=202,
        summary="Add a capture pvm-instance to the jobs queue"),
)

PLACEMENT_GROUPS = (
    _op("PcloudPlacementgroupsGetall", "GET", CI + "/placement-groups",
        summary="Get all Server Placement Groups"),
    _op("PcloudPlacementgroupsPost", "POST", CI + "/placement-groups",
        body=("name*", "policy*"),
        summary="Create a new Server Placement Group"),
    _op("PcloudPlacementgroupsGet", "GET", CI + "/placement-groups/{placement_group_id}",
        summary="Get Server Placement Group detail"),
    _op("PcloudPlacementgroupsDelete", "DELETE", CI + "/placement-groups/{placement_group_id}",
        summary="Delete Server Placement Group"),
    _op("PcloudPlacementgroupsMembersPost", "POST", CI + "/placement-groups/{placement_group_id}/members",
        body=("id*",),
        summary="Add Server to Placement Group"),
    _op("PcloudPlacementgroupsMembersDelete", "DELETE", CI + "/placement-groups/{placement_group_id}/members",
        body=("id*",),
        summary="Remove Server from Placement Group"),
    _op("PcloudSppplacementgroupsGetall", "GET", CI + "/spp-placement-groups",
        summary="Get the list of Shared Processor Pool Placement Groups for a cloud instance"),
    _op("PcloudSppplacementgroupsPost", "POST", CI + "/spp-placement-groups",
        body=("name*", "policy*"),
        summary="Create a new Shared Processor Pool Placement Group"),
    _op("PcloudSppplacementgroupsGet", "GET", CI + "/spp-placement-groups/{spp_placement_group_id}",
        summary="Get the detail of a Shared Processor Pool Placement Group for a cloud instance"),
    _op("PcloudSppplacementgroupsDelete", "DELETE", CI + "/spp-placement-groups/{spp_placement_group_id}",
        summary="Delete a Shared Processor Pool Placement Group from a cloud instance"),
    _op("PcloudSppplacementgroupsMembersPost", "POST",
        CI + "/spp-placement-groups/{spp_placement_group_id}/members/{shared_processor_pool_id}",
        summary="Add Shared Processor Pool as a member of a Shared Processor Pool Placement Group"),
    _op("PcloudSppplacementgroupsMembersDelete", "DELETE",
        CI + "/spp-placement-groups/{spp_placement_group_id}/members/{shared_processor_pool_id}",
        summary="Delete Shared Processor Pool member from a Shared Processor Pool Placement Group"),
)

SAP = (
    _op("PcloudSapGetall", "GET", CI + "/sap",
        summary="Get list of SAP profiles"),
    _op("PcloudSapPost", "POST", CI + "/sap",
        body=("imageID*", "name*", "networks*", "profileID*", "deploymentType", "instances", "pinPolicy",
              "placementGroup", "sshKeyName", "storageAffinity", "storagePool", "storageType", "sysType",
              "userData", "volumeIDs"),
        result=ARRAY,
        summary="Create a new SAP PVM Instance"),
    _op("PcloudSapGet", "GET", CI + "/sap/{sap_profile_id}",
        summary="Get the information on an SAP profile"),
)

DHCP = (
    _op("PcloudDhcpGetall", "GET", CI + "/services/dhcp", result=ARRAY,
        summary="Get all DHCP Servers information (OpenShift Internal Use Only)"),
    _op("PcloudDhcpPost", "POST", CI + "/services/dhcp",
        body=("cidr", "cloudConnectionID", "dnsServer", "name", "snatEnabled"), status=202,
        summary="Create a DHCP Server (OpenShift Internal Use Only)"),
    _op("PcloudDhcpGet", "GET", CI + "/services/dhcp/{dhcp_id}",
        summary="Get DHCP Server information (OpenShift Internal Use Only)"),
    _op("PcloudDhcpDelete", "DELETE", CI + "/services/dhcp/{dhcp_id}", status=202,
        summary="Delete DHCP Server (OpenShift Internal Use Only)"),
)

SHARED_PROCESSOR_POOLS = (
    _op("PcloudSharedprocessorpoolsGetall", "GET", CI + "/shared-processor-pools",
        summary="Get the list of Shared Processor Pools for a cloud instance"),
    _op("PcloudSharedprocessorpoolsPost", "POST", CI + "/shared-processor-pools",
        body=("hostGroup*", "name*", "reservedCores*", "placementGroupID"), status=202,
        summary="Create a new Shared Processor Pool"),
    _op("PcloudSharedprocessorpoolsGet", "GET", CI + "/shared-processor-pools/{shared_processor_pool_id}",
        summary="Get the detail of a Shared Processor Pool for a cloud instance"),
    _op("PcloudSharedprocessorpoolsPut", "PUT", CI + "/shared-processor-pools/{shared_processor_pool_id}",
        body=("name", "reservedCores"),
        summary="Update a Shared Processor Pool for a cloud instance"),
    _op("PcloudSharedprocessorpoolsDelete", "DELETE", CI + "/shared-processor-pools/{shared_processor_pool_id}",
        summary="Delete a Shared Processor Pool from a cloud instance"),
)

SNAPSHOTS = (
    _op("PcloudCloudinstancesSnapshotsGetall", "GET", CI + "/snapshots",
        summary="List all PVM instance snapshots for this cloud instance"),
    _op("PcloudCloudinstancesSnapshotsGet", "GET", CI + "/snapshots/{snapshot_id}",
        summary="Get the detail of a snapshot"),
    _op("PcloudCloudinstancesSnapshotsPut", "PUT", CI + "/snapshots/{snapshot_id}",
        body=("description", "name"),
        summary="Update a PVM instance snapshot"),
    _op("PcloudCloudinstancesSnapshotsDelete", "DELETE", CI + "/snapshots/{snapshot_id}", status=202,
        summary="Delete a PVM instance snapshot of a cloud instance"),
)

STORAGE_CAPACITY = (
    _op("PcloudStoragecapacityPoolsGetall", "GET", CI + "/storage-capacity/storage-pools",
        summary="Storage capacity for all available storage pools in a region"),
    _op("PcloudStoragecapacityPoolsGet", "GET", CI + "/storage-capacity/storage-pools/{storage_pool_name}",
        summary="Storage capacity for a storage pool in a region"),
    _op("PcloudStoragecapacityTypesGetall", "GET", CI + "/storage-capacity/storage-types",
        summary="Storage capacity for all available storage types in a region"),
    _op("PcloudStoragecapacityTypesGet", "GET", CI + "/storage-capacity/storage-types/{storage_type_name}",
        summary="Storage capacity for a storage type in a region"),
    _op("PcloudSystempoolsGet", "GET", CI + "/system-pools",
        summary="List of available system pools within a particular DataCenter"),
)

TASKS_AND_TENANTS = (
    _op("PcloudTasksGet", "GET", "/pcloud/v1/tasks/{task_id}",
        summary="Get a Task"),
    _op("PcloudTasksDelete", "DELETE", "/pcloud/v1/tasks/{task_id}",
        summary="Delete a Task"),
    _op("PcloudTenantsGet", "GET", "/pcloud/v1/tenants/{tenant_id}",
        summary="Get a Tenant's current state/information"),
    _op("PcloudTenantsPut", "PUT", "/pcloud/v1/tenants/{tenant_id}",
        body=("icn", "peeringNetworks"),
        summary="Update a tenant"),
    _op("PcloudTenantsSshkeysGetall", "GET", "/pcloud/v1/tenants/{tenant_id}/sshkeys",
        summary="List a Tenant's SSH Keys"),
    _op("PcloudTenantsSshkeysPost", "POST", "/pcloud/v1/tenants/{tenant_id}/sshkeys",
        body=("name*", "sshKey*", "creationDate"),
        summary="Add a new SSH key to the Tenant"),
    _op("PcloudTenantsSshkeysGet", "GET", "/pcloud/v1/tenants/{tenant_id}/sshkeys/{sshkey_name}",
        summary="Get a Tenant's SSH Key by name"),
    _op("PcloudTenantsSshkeysPut", "PUT", "/pcloud/v1/tenants/{tenant_id}/sshkeys/{sshkey_name}",
        body=("name*", "sshKey*", "creationDate"),
        summary="Update an SSH Key"),
    _op("PcloudTenantsSshkeysDelete", "DELETE", "/pcloud/v1/tenants/{tenant_id}/sshkeys/{sshkey_name}",
        summary="Delete a Tenant's SSH key"),
)

VPN_OPERATIONS = (
    _op("PcloudVpnconnectionsGetall", "GET", VPN,
        summary="Get all VPN Connections"),
    _op("PcloudVpnconnectionsPost", "POST", VPN,
        body=("ikePolicy*", "ipSecPolicy*", "mode*", "name*", "networks*", "peerGatewayAddress*",
              "peerSubnets*"),
        status=202,
        summary="Create VPN Connection"),
    _op("PcloudVpnconnectionsGet", "GET", VPN + "/{vpn_connection_id}",
        summary="Get VPN Connection"),
    _op("PcloudVpnconnectionsPut", "PUT", VPN + "/{vpn_connection_id}",
        body=("@vpn_connection_update*",),
        summary="Update VPN Connection"),
    _op("PcloudVpnconnectionsDelete", "DELETE", VPN + "/{vpn_connection_id}", status=202,
        summary="Delete VPN Connection"),
    _op("PcloudVpnconnectionsNetworksGet", "GET", VPN + "/{vpn_connection_id}/networks",
        summary="Get attached networks"),
    _op("PcloudVpnconnectionsNetworksPut", "PUT", VPN + "/{vpn_connection_id}/networks",
        body=("networkID*",), status=202,
        summary="Attach network"),
    _op("PcloudVpnconnectionsNetworksDelete", "DELETE", VPN + "/{vpn_connection_id}/networks",
        body=("networkID*",), status=202,
        summary="Detach network"),
    _op("PcloudVpnconnectionsPeersubnetsGet", "GET", VPN + "/{vpn_connection_id}/peer-subnets",
        summary="Get Peer Subnets"),
    _op("PcloudVpnconnectionsPeersubnetsPut", "PUT", VPN + "/{vpn_connection_id}/peer-subnets",
        body=("cidr*",),
        summary="Attach Peer Subnet"),
    _op("PcloudVpnconnectionsPeersubnetsDelete", "DELETE", VPN + "/{vpn_connection_id}/peer-subnets",
        body=("cidr*",),
        summary="Detach Peer Subnet"),
    _op("PcloudIkepoliciesGetall", "GET", CI + "/vpn/ike-policies",
        summary="Get all IKE Policies"),
    _op("PcloudIkepoliciesPost", "POST", CI + "/vpn/ike-policies",
        body=("dhGroup*", "encryption*", "keyLifetime*", "name*", "presharedKey*", "version*",
              "authentication"),
        summary="Add IKE Policy"),
    _op("PcloudIkepoliciesGet", "GET", CI + "/vpn/ike-policies/{ike_policy_id}",
        summary="Get the specified IKE Policy"),
    _op("PcloudIkepoliciesPut", "PUT", CI + "/vpn/ike-policies/{ike_policy_id}",
        body=("@ike_policy_update*",),
        summary="Update IKE Policy"),
    _op("PcloudIkepoliciesDelete", "DELETE", CI + "/vpn/ike-policies/{ike_policy_id}",
        summary="Delete IKE Policy"),
    _op("PcloudIpsecpoliciesGetall", "GET", CI + "/vpn/ipsec-policies",
        summary="Get all IPSec Policies"),
    _op("PcloudIpsecpoliciesPost", "POST", CI + "/vpn/ipsec-policies",
        body=("dhGroup*", "encryption*", "keyLifetime*", "name*", "pfs*", "authentication"),
        summary="Add IPSec Policy"),
    _op("PcloudIpsecpoliciesGet", "GET", CI + "/vpn/ipsec-policies/{ipsec_policy_id}",
        summary="Get the specified IPSec Policy"),
    _op("PcloudIpsecpoliciesPut", "PUT", CI + "/vpn/ipsec-policies/{ipsec_policy_id}",
        body=("@ipsec_policy_update*",),
        summary="Update IPSec Policy"),
    _op("PcloudIpsecpoliciesDelete", "DELETE", CI + "/vpn/ipsec-policies/{ipsec_policy_id}",
        summary="Delete IPSec Policy"),
)

VOLUME_GROUPS = (
    _op("PcloudVolumegroupsGetall", "GET", CI + "/volume-groups",
        summary="Get all volume groups"),
    _op("PcloudVolumegroupsPost", "POST", CI + "/volume-groups",
        body=("volumeIDs*", "consistencyGroupName", "name"), status=202,
        summary="Create a new volume group"),
    _op("PcloudVolumegroupsGetallDetails", "GET", CI + "/volume-groups/details",
        summary="Get all volume groups with details"),
    _op("PcloudVolumegroupsGet", "GET", CI + "/volume-groups/{volume_group_id}",
        summary="Get volume Group"),
    _op("PcloudVolumegroupsPut", "PUT", CI + "/volume-groups/{volume_group_id}",
        body=("addVolumes", "removeVolumes"), status=202,
        summary="Updates the volume group"),
    _op("PcloudVolumegroupsDelete", "DELETE", CI + "/volume-groups/{volume_group_id}", status=202,
        summary="Delete a cloud instance volume group"),
    _op("PcloudVolumegroupsActionPost", "POST", CI + "/volume-groups/{volume_group_id}/action",
        body=("@volume_group_action*",), status=202,
        summary="Perform an action (start stop reset) on a volume group"),
    _op("PcloudVolumegroupsGetDetails", "GET", CI + "/volume-groups/{volume_group_id}/details",
        summary="Get volume Group details"),
    _op("PcloudVolumegroupsRemoteCopyRelationshipsGet", "GET",
        CI + "/volume-groups/{volume_group_id}/remote-copy-relationships",
        summary="Get remote copy relationships of the volume belonging to volume group"),
    _op("PcloudVolumegroupsStorageDetailsGet", "GET", CI + "/volume-groups/{volume_group_id}/storage-details",
        summary="Get storage details of volume group"),
)

VOLUMES = (
    _op("PcloudVolumeOnboardingGetall", "GET", CI + "/volumes/onboarding",
        summary="List all volume onboardings for this cloud instance"),
    _op("PcloudVolumeOnboardingPost", "POST", CI + "/volumes/onboarding",
        body=("volumes*", "description"), status=202,
        summary="Onboard auxiliary volumes to target site"),
    _op("PcloudVolumeOnboardingGet", "GET", CI + "/volumes/onboarding/{volume_onboarding_id}",
        summary="Get the information of volume onboarding operation"),
    _op("PcloudPvminstancesVolumesGetall", "GET", PVM + "/volumes",
        summary="List all volumes attached to a PVM Instance"),
    _op("PcloudPvminstancesVolumesGet", "GET", PVM + "/volumes/{volume_id}",
        summary="Detailed info of a volume attached to a PVMInstance"),
    _op("PcloudPvminstancesVolumesPost", "POST", PVM + "/volumes/{volume_id}",
        summary="Attach a volume to a PVMInstance"),
    _op("PcloudPvminstancesVolumesPut", "PUT", PVM + "/volumes/{volume_id}",
        body=("deleteOnTermination*",),
        summary="Update a volume attached to a PVMInstance"),
    _op("PcloudPvminstancesVolumesDelete", "DELETE", PVM + "/volumes/{volume_id}", status=202,
        summary="Detach a volume from a PVMInstance"),
    _op("PcloudPvminstancesVolumesSetbootPut", "PUT", PVM + "/volumes/{volume_id}/setboot",
        summary="Set the PVMInstance volume as the boot volume"),
    _op("PcloudCloudinstancesVolumesGetall", "GET", CI + "/volumes",
        query=("replicationEnabled", "affinity", "auxiliary"),
        summary="List all volumes for this cloud instance"),
    _op("PcloudCloudinstancesVolumesPost", "POST", CI + "/volumes",
        body=_VOLUME_CREATE_BODY, status=202,
        summary="Create a new data Volume"),
    _op("PcloudVolumesClonePost", "POST", CI + "/volumes/clone",
        body=("displayName*", "volumeIDs*"),
        summary="Create a volume clone for specified volumes"),
    _op("PcloudCloudinstancesVolumesGet", "GET", CI + "/volumes/{volume_id}",
        summary="Detailed info of a volume"),
    _op("PcloudCloudinstancesVolumesPut", "PUT", CI + "/volumes/{volume_id}",
        body=("bootable", "name", "shareable", "size"),
        summary="Update a cloud instance volume"),
    _op("PcloudCloudinstancesVolumesDelete", "DELETE", CI + "/volumes/{volume_id}",
        summary="Delete a cloud instance volume"),
    _op("PcloudCloudinstancesVolumesActionPost", "POST", CI + "/volumes/{volume_id}/action",
        body=("replicationEnabled",), status=202,
        summary="Perform an action on a Volume"),
    _op("PcloudCloudinstancesVolumesFlashCopyMappingsGet", "GET", CI + "/volumes/{volume_id}/flash-copy-mappings",
        result=ARRAY,
        summary="Get a list of flashcopy mappings of a given volume"),
    _op("PcloudCloudinstancesVolumesRemoteCopyRelationshipGet", "GET",
        CI + "/volumes/{volume_id}/remote-copy-relationship",
        summary="Get remote copy relationship of a volume"),
    _op("PcloudV2PvminstancesVolumesPost", "POST", CI2 + "/pvm-instances/{pvm_instance_id}/volumes",
        body=("volumeIDs*", "performancePath"), status=202,
        summary="Attach all volumes to a PVMInstance"),
    _op("PcloudV2VolumesPost", "POST", CI2 + "/volumes",
        body=_VOLUME_CREATE_BODY + ("count",), status=201,
        summary="Create multiple data volumes from a single definition"),
    _op("PcloudV2VolumesClonePost", "POST", CI2 + "/volumes/clone",
        body=("name*", "volumeIDs*"), status=202,
        summary="Create a volume clone for specified volumes"),
    _op("PcloudV2VolumesClonetasksGet", "GET", CI2 + "/volumes/clone-tasks/{clone_task_id}",
        headers=("Accept",),
        summary="Get the status of a volumes clone request for the specified clone task ID"),
)

VOLUMES_CLONE = (
    _op("PcloudV2VolumescloneGetall", "GET", CI2 + "/volumes-clone",
        query=("filter",),
        summary="Get the list of volumes-clone request for a cloud instance"),
    _op("PcloudV2VolumesclonePost", "POST", CI2 + "/volumes-clone",
        body=("name*", "volumeIDs*", "performancePath"), status=202,
        summary="Create a new volumes clone request and initiate the Prepare action"),
    _op("PcloudV2VolumescloneGet", "GET", CI2 + "/volumes-clone/{volumes_clone_id}",
        summary="Get the details for a volumes-clone request"),
    _op("PcloudV2VolumescloneDelete", "DELETE", CI2 + "/volumes-clone/{volumes_clone_id}",
        summary="Delete a volumes-clone request"),
    _op("PcloudV2VolumescloneCancelPost", "POST", CI2 + "/volumes-clone/{volumes_clone_id}/cancel",
        body=("force",), status=202,
        summary="Cancel a volumes-clone request and initiate the Cleanup action"),
    _op("PcloudV2VolumescloneExecutePost", "POST", CI2 + "/volumes-clone/{volumes_clone_id}/execute",
        body=("name*", "rollbackPrepare"), status=202,
        summary="Initiate the Execute action for a volumes-clone request"),
    _op("PcloudV2VolumescloneStartPost", "POST", CI2 + "/volumes-clone/{volumes_clone_id}/start",
        summary="Initiate the Start action for a volumes-clone request"),
)

OPEN_SERVICE_BROKER = (
    _op("ServiceBindingGet", "GET", OSB_BINDING,
        headers=OSB_HEADERS,
        summary="Gets a service binding"),
    _op("ServiceBindingBinding", "PUT", OSB_BINDING,
        query=("accepts_incomplete",), headers=OSB_HEADERS,
        body=("plan_id*", "service_id*", "app_guid", "bind_resource", "context", "parameters"),
        summary="Generation of a service binding"),
    _op("ServiceBindingUnbinding", "DELETE", OSB_BINDING,
        query=("service_id*", "plan_id*", "accepts_incomplete"), headers=OSB_HEADERS,
        summary="Deprovision of a service binding"),
    _op("ServiceBindingLastOperationGet", "GET", OSB_BINDING + "/last_operation",
        query=("service_id", "plan_id", "operation"), headers=OSB_HEADERS[:1],
        summary="Last requested operation state for service binding"),
    _op("ServiceInstanceGet", "GET", OSB_INSTANCE,
        headers=OSB_HEADERS,
        summary="Gets a service instance"),
    _op("ServiceInstanceUpdate", "PATCH", OSB_INSTANCE,
        query=("accepts_incomplete",), headers=OSB_HEADERS,
        body=("service_id*", "context", "parameters", "plan_id", "previous_values"),
        summary="Update a service instance"),
    _op("ServiceInstanceProvision", "PUT", OSB_INSTANCE,
        query=("accepts_incomplete",), headers=OSB_HEADERS,
        body=("plan_id*", "service_id*", "context", "organization_guid", "parameters", "space_guid"),
        summary="Provision a service instance"),
    _op("ServiceInstanceDeprovision", "DELETE", OSB_INSTANCE,
        query=("service_id*", "plan_id*", "accepts_incomplete"), headers=OSB_HEADERS,
        summary="Deprovision a service instance"),
    _op("ServiceInstanceLastOperationGet", "GET", OSB_INSTANCE + "/last_operation",
        query=("service_id", "plan_id", "operation"), headers=OSB_HEADERS[:1],
        summary="Last requested operation state for service instance"),
)


OPERATIONS: dict[str, Operation] = {
    op.operation_id: op
    for group in (
        SERVICE_BROKER_AUTH, SERVICE_BROKER, INTERNAL, CLOUD_CONNECTIONS, LOCATIONS_AND_EVENTS,
        IMAGES, CLOUD_INSTANCES, NETWORKS, PVM_INSTANCES, PLACEMENT_GROUPS, SAP, DHCP,
        SHARED_PROCESSOR_POOLS, SNAPSHOTS, STORAGE_CAPACITY, TASKS_AND_TENANTS, VPN_OPERATIONS,
        VOLUME_GROUPS, VOLUMES, VOLUMES_CLONE, OPEN_SERVICE_BROKER,
    )
    for op in group
}
