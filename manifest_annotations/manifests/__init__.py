"""Kubernetes manifests wrapped for annotation, loaded from and dumped to multi-document yaml"""
