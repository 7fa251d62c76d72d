"""Manage the structured annotations attached to Kubernetes manifests

Each descriptor family is stored under its own key namespace, one annotation per field, so annotations set by
other actors on the same resource are never touched.
"""
