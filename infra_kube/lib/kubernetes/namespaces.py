from enum import Enum


class Namespace(str, Enum):
    """Namespaces the infrastructure charts are installed into"""

    APPLICATIONS = "applications"
    ARGOCD = "argocd"
    ARGO_EVENT = "argo-event"
    ARGO_WORKFLOWS = "argo-workflows"
    ARGO_ROLLOUT = "argo-rollout"
    CERT_MANAGER = "cert-manager"
    LINKERD = "linkerd"
    LINKERD_VIZ = "linkerd-viz"
    DEFAULT = "default"
    # comes with every cluster
    KUBE_SYSTEM = "kube-system"
    TIKV_ADMIN = "tikv-admin"
    SEAWEEDFS = "seaweedfs"
    METALB = "metalb"
    NATS_OPERATOR = "nats-operator"
    LONGHORN_SYSTEM = "longhorn-system"
    MONITORING = "monitoring"
    HARBOR = "harbor"
    GITEA = "gitea"
    VELERO = "velero"


class ResourceType(str, Enum):
    """Top-level grouping of rendered manifests"""

    INFRASTRUCTURE = "infrastructure"
    SERVICES = "services"
