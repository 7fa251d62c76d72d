import sys

import click

from manifest_annotations import logs
from manifest_annotations.manifests import manager as manifests_manager

from . import manager
from .descriptors import Moniker, Artifact, Relationships
from .exceptions import AnnotationError


@click.command()
@click.argument('MANIFESTS_FILE', type=click.File('r'))
@click.option('--cluster')
@click.option('--app')
@click.option('--stack')
@click.option('--detail')
@click.option('--sequence', type=int)
@click.option('--artifact-type')
@click.option('--artifact-name')
@click.option('--artifact-location')
@click.option('--artifact-version')
@click.option('--load-balancer', 'load_balancers', multiple=True, help='can be repeated, order is preserved')
@click.option('--security-group', 'security_groups', multiple=True, help='can be repeated, order is preserved')
def annotate(manifests_file, cluster, app, stack, detail, sequence, artifact_type, artifact_name,
             artifact_location, artifact_version, load_balancers, security_groups):
    """Annotate manifests and their pod templates, printing the annotated yaml

    Use - as MANIFESTS_FILE to read from stdin
    """
    annotater = manager.get_annotater()
    moniker = Moniker(app=app, cluster=cluster, stack=stack, detail=detail, sequence=sequence)
    artifact = None
    if any([artifact_type, artifact_name, artifact_location, artifact_version]):
        artifact = Artifact(type=artifact_type, name=artifact_name, location=artifact_location,
                            version=artifact_version)
    relationships = None
    if load_balancers or security_groups:
        relationships = Relationships(load_balancers=list(load_balancers) if load_balancers else None,
                                      security_groups=list(security_groups) if security_groups else None)
    manifests = manifests_manager.load_manifests(manifests_file)
    for manifest in manifests:
        logs.debug('annotating manifest', kind=manifest.kind, name=manifest.name)
        try:
            annotater.annotate_moniker(manifest, moniker)
            annotater.annotate_artifact(manifest, artifact)
            annotater.annotate_relationships(manifest, relationships)
        except AnnotationError as e:
            logs.critical(str(e), kind=manifest.kind, name=manifest.name)
            logs.exit_catastrophic_failure(quiet=True)
    manifests_manager.dump_manifests(manifests, sys.stdout)


@click.command()
@click.argument('MANIFESTS_FILE', type=click.File('r'))
def get(manifests_file):
    """Print the moniker, artifact and relationships annotated on each manifest

    Use - as MANIFESTS_FILE to read from stdin
    """
    annotater = manager.get_annotater()
    data = []
    for manifest in manifests_manager.load_manifests(manifests_file):
        try:
            data.append({
                'kind': manifest.kind,
                'name': manifest.name,
                'moniker': dict(annotater.get_manifest_moniker(manifest)._asdict()),
                'artifact': dict(annotater.get_manifest_artifact(manifest)._asdict()),
                'relationships': dict(annotater.get_manifest_relationships(manifest)._asdict()),
            })
        except AnnotationError as e:
            logs.critical(str(e), kind=manifest.kind, name=manifest.name)
            logs.exit_catastrophic_failure(quiet=True)
    logs.print_yaml_dump(data)


@click.command()
def keys():
    """Print the annotation keys used for each descriptor field"""
    annotater = manager.get_annotater()
    logs.print_yaml_dump([dict(entry._asdict()) for entry in annotater.schema])
