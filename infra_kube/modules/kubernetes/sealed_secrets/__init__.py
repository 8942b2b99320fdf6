from .sealed_secrets import SealedSecrets
