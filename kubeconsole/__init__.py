"""KubeConsole - terminal console for Kubernetes cluster nodes."""

__version__ = "0.1.0"
