from .seaweedfs import Seaweedfs
