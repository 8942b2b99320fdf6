from typing import Any

from .config import SeaweedfsConfig, StorageArgs

_MASTER_INGRESS_SNIPPET = """
sub_filter '<head>' '<head> <base href="/sw-master/">'; #add base url
sub_filter '="/' '="./'; #make absolute paths to relative
sub_filter '=/' '=./';
sub_filter '/seaweedfsstatic' './seaweedfsstatic';
sub_filter_once off;
"""


def _storage(storage: StorageArgs) -> dict[str, Any]:
    return {
        "type": storage.type,
        "size": str(storage.size),
        "storageClass": storage.storage_class,
    }


def _master_ingress_annotations(config: SeaweedfsConfig) -> dict[str, str]:
    return {
        "nginx.ingress.kubernetes.io/auth-type": "basic",
        "nginx.ingress.kubernetes.io/auth-secret": config.basic_auth_secret,
        "nginx.ingress.kubernetes.io/auth-realm": "Authentication Required - SW-Master",
        "nginx.ingress.kubernetes.io/service-upstream": "true",
        "nginx.ingress.kubernetes.io/rewrite-target": "/$1",
        "nginx.ingress.kubernetes.io/use-regex": "true",
        "nginx.ingress.kubernetes.io/enable-rewrite-log": "true",
        "nginx.ingress.kubernetes.io/ssl-redirect": "false",
        "nginx.ingress.kubernetes.io/force-ssl-redirect": "false",
        "nginx.ingress.kubernetes.io/configuration-snippet": _MASTER_INGRESS_SNIPPET,
    }


def build_seaweedfs_values(config: SeaweedfsConfig) -> dict[str, Any]:
    """
    Values tree for the SeaweedFS chart

    The filer keeps its metadata in TiKV, everything else stays close to the chart defaults. ``None`` entries are
    left to the chart.

    :param config: SeaweedFS config
    :return: Values tree
    """
    return {
        "global": {
            "imageName": config.image_name,
            "imagePullPolicy": "IfNotPresent",
            "imagePullSecrets": config.image_pull_secrets,
            "restartPolicy": "Always",
            "loggingLevel": config.logging_level,
            "enableSecurity": False,
            "monitoring": {
                "enabled": False,
                "gatewayHost": None,
                "gatewayPort": None,
            },
            "enableReplication": config.enable_replication,
            "replicationPlacment": config.replication_placement,
            "extraEnvironmentVars": {
                "WEED_CLUSTER_DEFAULT": "sw",
                "WEED_CLUSTER_SW_MASTER": "seaweedfs-master:9333",
                "WEED_CLUSTER_SW_FILER": "seaweedfs-filer-client:8888",
            },
        },
        "image": {
            "registry": "",
            "repository": "",
        },
        "master": {
            "enabled": True,
            "replicas": config.master_replicas,
            "port": 9333,
            "grpcPort": 19333,
            "metricsPort": 9327,
            "ipBind": "0.0.0.0",
            "volumePreallocate": False,
            "volumeSizeLimitMB": config.volume_size_limit_mb,
            "loggingOverrideLevel": None,
            "pulseSeconds": None,
            "garbageThreshold": None,
            "metricsIntervalSec": config.metrics_interval_sec,
            "defaultReplication": config.default_replication,
            "disableHttp": False,
            "data": _storage(config.master_data),
            "logs": {
                "type": "hostPath",
                "size": "",
                "storageClass": "",
            },
            "initContainers": "",
            "extraVolumes": "",
            "extraVolumeMounts": "",
            "resources": None,
            "updatePartition": 0,
            "affinity": None,
            "tolerations": "",
            "nodeSelector": config.node_selector,
            "priorityClassName": "",
            "ingress": {
                "enabled": config.ingress_enabled,
                "className": config.ingress_class_name,
                "annotations": _master_ingress_annotations(config),
            },
            "extraEnvironmentVars": {
                "WEED_MASTER_VOLUME_GROWTH_COPY_1": 7,
                "WEED_MASTER_VOLUME_GROWTH_COPY_2": 6,
                "WEED_MASTER_VOLUME_GROWTH_COPY_3": 3,
                "WEED_MASTER_VOLUME_GROWTH_COPY_OTHER": 1,
            },
        },
        "volume": {
            "replicas": config.volume_replicas,
            "data": _storage(config.volume_data),
            "idx": {},
            "logs": {},
        },
        "filer": {
            "imageOverride": config.filer_image_override,
            "replicas": config.filer_replicas,
            "port": 8888,
            "grpcPort": 18888,
            "metricsPort": 9327,
            "defaultReplicaPlacement": config.default_replication,
            "encryptVolumeData": config.encrypt_volume_data,
            "dirListLimit": config.dir_list_limit,
            "data": _storage(config.filer_data),
            "ingress": {
                "annotations": {},
            },
            "extraEnvironmentVars": {
                "WEED_TIKV_ENABLED": "true",
                "WEED_TIKV_PDADDRS": config.tikv_pd_address,
                "WEED_MYSQL_ENABLED": "false",
                "WEED_LEVELDB2_ENABLED": "false",
                "WEED_FILER_OPTIONS_RECURSIVE_DELETE": "false",
                "WEED_FILER_BUCKETS_FOLDER": config.buckets_folder,
            },
            "s3": {
                "enabled": config.filer_s3_enabled,
                "allowEmptyFolder": False,
                "domainName": "",
                "skipAuthSecretCreation": False,
                "auditLogConfig": {},
            },
        },
        "s3": {
            "enabled": config.standalone_s3_enabled,
            "replicas": config.s3_replicas,
            "port": 8333,
            "metricsPort": 9327,
            "allowEmptyFolder": False,
            "domainName": "",
            "skipAuthSecretCreation": False,
            "auditLogConfig": {},
            "nodeSelector": config.node_selector,
        },
        "certificates": {
            "commonName": config.certificate_common_name,
            "ipAddresses": [],
            "keyAlgorithm": "rsa",
            "keySize": 2048,
            "duration": "2160h",
            "renewBefore": "360h",
        },
    }
