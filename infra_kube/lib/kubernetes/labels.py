from pulumi import get_stack, get_project

from infra_kube.lib.config import label_namespace, get_environment


def get_labels(service: str, role: str, group: str = None) -> dict[str, str]:
    """
    Generate the standard labels for Kubernetes objects

    example labels:
      seaweedfs filer:
        app.kubernetes.io/name = seaweedfs
        app.kubernetes.io/component = filer
        app.kubernetes.io/instance = seaweedfs-filer
        app.kubernetes.io/managed-by = pulumi
        app.kubernetes.io/part-of = main
        infra-kube/environment = local
        infra-kube/stack = seaweedfs
        infra-kube/project = infrastructure

      argo events default eventbus:
        app.kubernetes.io/name = argo-events
        app.kubernetes.io/component = eventbus
        app.kubernetes.io/instance = argo-events-eventbus-default
        app.kubernetes.io/managed-by = pulumi
        app.kubernetes.io/part-of = default
        infra-kube/environment = production
        infra-kube/stack = argo-events
        infra-kube/project = infrastructure

    :param service: The application the object belongs to (seaweedfs, argo-events, sealed-secrets,...)
    :param role: The component this object is within the application (filer, master, eventbus,...)
    :param group: The group this object belongs to. Leave unset to use "main".
    :return: Dict of labels
    """
    group_name = group or "main"
    group_suffix = f"-{group}" if group else ""

    return {
        "app.kubernetes.io/name": service,
        "app.kubernetes.io/component": role,
        "app.kubernetes.io/instance": f"{service}-{role}{group_suffix}",
        "app.kubernetes.io/managed-by": "pulumi",
        "app.kubernetes.io/part-of": group_name,
        f"{label_namespace}/environment": get_environment().value,
        f"{label_namespace}/stack": get_stack(),
        f"{label_namespace}/project": get_project(),
    }
