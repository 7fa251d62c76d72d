# Default domain of the annotation key namespaces
# the full keys are part of the stored data format and must not be renamed without a migration
SPINNAKER_ANNOTATION = 'spinnaker.io'

RELATIONSHIPS_FAMILY = 'relationships'
MONIKER_FAMILY = 'moniker'
ARTIFACT_FAMILY = 'artifact'

# shapes of the values stored under a key
SHAPE_STRING = 'string'
SHAPE_LIST = 'list'
SHAPE_INTEGER = 'integer'

SHAPES = (SHAPE_STRING, SHAPE_LIST, SHAPE_INTEGER)

# descriptor attribute, annotation key suffix and value shape of each field, per family
FAMILY_FIELDS = {
    RELATIONSHIPS_FAMILY: (
        ('load_balancers', 'loadBalancers', SHAPE_LIST),
        ('security_groups', 'securityGroups', SHAPE_LIST),
    ),
    MONIKER_FAMILY: (
        ('cluster', 'cluster', SHAPE_STRING),
        ('app', 'application', SHAPE_STRING),
        ('stack', 'stack', SHAPE_STRING),
        ('detail', 'detail', SHAPE_STRING),
        ('sequence', 'sequence', SHAPE_INTEGER),
    ),
    ARTIFACT_FAMILY: (
        ('type', 'type', SHAPE_STRING),
        ('name', 'name', SHAPE_STRING),
        ('location', 'location', SHAPE_STRING),
        ('version', 'version', SHAPE_STRING),
    ),
}
