"""Screens for KubeConsole."""
