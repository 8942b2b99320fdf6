from .argo_events import ArgoEvents
