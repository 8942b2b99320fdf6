from .core import (
    Environment,
    get_environment,
    get_kube_context,
    get_manifests_base_dir,
    get_provider_override,
    label_namespace,
    render_manifests_enabled,
)
from .infra_env import infra_env, HierarchicalConfig, InfraConfigException
from .mapper import get_stack_config, config_from_dict, load_config_file
