import yaml

from manifest_annotations import logs


class KubernetesManifest(object):
    """Wraps a raw Kubernetes resource dict, exposing the annotation maps the annotater writes to

    The wrapped dict is modified in place, annotation maps are created when first accessed
    """

    def __init__(self, values):
        assert isinstance(values, dict), f'invalid manifest, expected a mapping: {type(values).__name__}'
        self.values = values

    @property
    def kind(self):
        return self.values.get('kind')

    @property
    def name(self):
        return self.values.get('metadata', {}).get('name')

    @property
    def namespace(self):
        return self.values.get('metadata', {}).get('namespace')

    @property
    def annotations(self):
        return _get_metadata_annotations(self.values)

    def spec_template_annotations(self):
        """Yields the annotation maps of the pod templates embedded in the manifest spec

        Covers workloads with a spec.template (Deployment, StatefulSet, DaemonSet, ReplicaSet, Job)
        and CronJobs with a spec.jobTemplate.spec.template
        """
        spec = self.values.get('spec')
        if not isinstance(spec, dict):
            return
        template = spec.get('template')
        if isinstance(template, dict):
            yield _get_metadata_annotations(template)
        job_template = spec.get('jobTemplate')
        if isinstance(job_template, dict):
            job_spec = job_template.get('spec')
            if isinstance(job_spec, dict) and isinstance(job_spec.get('template'), dict):
                yield _get_metadata_annotations(job_spec['template'])

    def __repr__(self):
        return f'<KubernetesManifest {self.kind}/{self.name}>'


def get_manifest(manifest):
    """Returns a manifest wrapper for a raw resource dict, other manifest objects are returned as is"""
    if isinstance(manifest, dict):
        return KubernetesManifest(manifest)
    else:
        return manifest


def get_manifest_annotations(manifest):
    """Returns the manifest's own annotations for reading, missing metadata is not created"""
    manifest = get_manifest(manifest)
    if isinstance(manifest, KubernetesManifest):
        return (manifest.values.get('metadata') or {}).get('annotations') or {}
    else:
        return manifest.annotations


def load_manifests(stream):
    manifests = []
    for values in yaml.safe_load_all(stream):
        if values is None:
            continue
        manifests.append(KubernetesManifest(values))
    logs.debug('loaded manifests', count=len(manifests))
    return manifests


def dump_manifests(manifests, stream=None):
    documents = [manifest.values if isinstance(manifest, KubernetesManifest) else manifest
                 for manifest in manifests]
    return yaml.dump_all(documents, stream, Dumper=logs.YamlSafeDumper, default_flow_style=False)


def _get_metadata_annotations(values):
    metadata = values.get('metadata')
    if metadata is None:
        metadata = values['metadata'] = {}
    annotations = metadata.get('annotations')
    if annotations is None:
        annotations = metadata['annotations'] = {}
    return annotations
