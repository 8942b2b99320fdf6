# This file is boilerplate. Copy it to any new projects you create.
# Its purpose is to call the launcher that exists as part of `infra_kube`.
# From there, the module to run is taken from the stack name (`seaweedfs`, `sealed-secrets`, `argo-events`).
from infra_kube.launcher import run_active_stack

run_active_stack("kubernetes")
