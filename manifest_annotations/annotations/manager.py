from manifest_annotations import logs
from manifest_annotations.config import manager as config_manager
from manifest_annotations.manifests import manager as manifests_manager

from .constants import RELATIONSHIPS_FAMILY, MONIKER_FAMILY, ARTIFACT_FAMILY
from .descriptors import Moniker, Artifact, Relationships
from .exceptions import MissingDescriptorError
from .schema import KeySchema, DEFAULT_KEY_SCHEMA
from .serializer import ValueSerializer


FAMILY_DESCRIPTORS = {
    RELATIONSHIPS_FAMILY: Relationships,
    MONIKER_FAMILY: Moniker,
    ARTIFACT_FAMILY: Artifact,
}


class ManifestAnnotater(object):
    """Stores monikers, artifacts and relationships as manifest annotations and reads them back

    Writes go to the manifest's own annotations and to the annotations of every pod template it embeds,
    so resources created from the templates can be identified as well. Reads only use the manifest's own
    annotations.

    Each field is encoded before it is stored, but a multi-field write is not atomic: if encoding a field fails,
    fields stored earlier in the same call stay in the annotations.
    """

    def __init__(self, serializer=None, schema=None):
        self.serializer = serializer or ValueSerializer()
        self.schema = schema or DEFAULT_KEY_SCHEMA

    # manifests

    def annotate_relationships(self, manifest, relationships):
        self._annotate_manifest(manifest, self.store_relationships, relationships, RELATIONSHIPS_FAMILY)

    def annotate_moniker(self, manifest, moniker):
        self._annotate_manifest(manifest, self.store_moniker, moniker, MONIKER_FAMILY)

    def annotate_artifact(self, manifest, artifact):
        self._annotate_manifest(manifest, self.store_artifact, artifact, ARTIFACT_FAMILY)

    def get_manifest_relationships(self, manifest):
        return self.get_relationships(manifests_manager.get_manifest_annotations(manifest))

    def get_manifest_moniker(self, manifest):
        return self.get_moniker(manifests_manager.get_manifest_annotations(manifest))

    def get_manifest_artifact(self, manifest):
        return self.get_artifact(manifests_manager.get_manifest_annotations(manifest))

    # annotation maps

    def store_relationships(self, annotations, relationships):
        if relationships is None:
            return
        self._store_annotations(annotations, RELATIONSHIPS_FAMILY, relationships)

    def store_moniker(self, annotations, moniker):
        if moniker is None:
            raise MissingDescriptorError('Every resource deployed via the annotater must be assigned a moniker')
        self._store_annotations(annotations, MONIKER_FAMILY, moniker)

    def store_artifact(self, annotations, artifact):
        if artifact is None:
            return
        self._store_annotations(annotations, ARTIFACT_FAMILY, artifact)

    def get_relationships(self, annotations):
        return Relationships(**self._get_annotations(annotations, RELATIONSHIPS_FAMILY))

    def get_moniker(self, annotations):
        return Moniker(**self._get_annotations(annotations, MONIKER_FAMILY))

    def get_artifact(self, annotations):
        return Artifact(**self._get_annotations(annotations, ARTIFACT_FAMILY))

    # private methods

    def _annotate_manifest(self, manifest, store, descriptor, family):
        manifest = manifests_manager.get_manifest(manifest)
        store(manifest.annotations, descriptor)
        num_templates = 0
        for template_annotations in manifest.spec_template_annotations():
            store(template_annotations, descriptor)
            num_templates += 1
        logs.debug('annotated manifest', family=family, templates=num_templates,
                   skipped=descriptor is None)

    def _store_annotations(self, annotations, family, descriptor):
        descriptor_type = FAMILY_DESCRIPTORS[family]
        if not isinstance(descriptor, descriptor_type):
            raise TypeError(f'expected {descriptor_type.__name__} to store {family} annotations, '
                            f'got {type(descriptor).__name__}')
        for entry in self.schema.get_family(family):
            value = getattr(descriptor, entry.field)
            if value is None:
                continue
            annotations[entry.key] = self.serializer.encode(value, entry.shape, key=entry.key)

    def _get_annotations(self, annotations, family):
        fields = {}
        for entry in self.schema.get_family(family):
            value = annotations.get(entry.key)
            fields[entry.field] = None if value is None else self.serializer.decode(value, entry.shape, key=entry.key)
        return fields


def get_annotater(domain=None):
    """Returns an annotater using the configured annotation domain"""
    domain = domain or config_manager.get('annotation-domain', required=True)
    schema = DEFAULT_KEY_SCHEMA if domain == DEFAULT_KEY_SCHEMA.domain else KeySchema(domain)
    return ManifestAnnotater(schema=schema)
