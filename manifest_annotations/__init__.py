"""Encode structured descriptors into Kubernetes manifest annotations and decode them back

Monikers (ownership and naming), artifacts (provenance) and relationships (links to load balancers and
security groups) are stored as namespaced JSON values in the manifest's metadata.annotations map and copied
into any pod templates the manifest embeds.
"""
