import click

from manifest_annotations import logs
from manifest_annotations.config import manager as config_manager
from manifest_annotations.annotations import cli as annotations_cli


CLICK_CLI_MAX_CONTENT_WIDTH = 200


@click.group(context_settings={'max_content_width': CLICK_CLI_MAX_CONTENT_WIDTH})
@click.option('--debug', is_flag=True)
@click.option('--domain', help='override the configured annotation domain (default: spinnaker.io)')
def main(debug, domain):
    """Annotate Kubernetes manifests with monikers, artifacts and relationships"""
    if debug:
        logs.set_debug()
    if domain:
        config_manager.set('annotation-domain', domain)


main.add_command(annotations_cli.annotate)
main.add_command(annotations_cli.get)
main.add_command(annotations_cli.keys)
