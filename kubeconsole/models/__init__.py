"""Data models for KubeConsole."""
