from collections import namedtuple

from .constants import SPINNAKER_ANNOTATION, FAMILY_FIELDS, SHAPES, RELATIONSHIPS_FAMILY, MONIKER_FAMILY, ARTIFACT_FAMILY


KeySchemaEntry = namedtuple('KeySchemaEntry', ['family', 'field', 'key', 'shape'])


class KeySchema(object):
    """Read-only table mapping every descriptor field to its annotation key

    Keys are built as <family>.<domain>/<suffix>, for example moniker.spinnaker.io/cluster
    """

    def __init__(self, domain=SPINNAKER_ANNOTATION):
        assert domain and '/' not in domain, f'invalid annotation domain: {domain}'
        self._domain = domain
        self._families = {
            family: tuple(
                KeySchemaEntry(family, field, f'{family}.{domain}/{suffix}', shape)
                for field, suffix, shape in fields
            )
            for family, fields in FAMILY_FIELDS.items()
        }
        keys = [entry.key for entry in self]
        assert len(keys) == len(set(keys)), f'duplicate annotation keys: {keys}'
        for entry in self:
            assert entry.shape in SHAPES, f'unknown shape for {entry.key}: {entry.shape}'

    @property
    def domain(self):
        return self._domain

    @property
    def families(self):
        return tuple(self._families.keys())

    def get_family(self, family):
        assert family in self._families, f'unknown annotation family: {family}'
        return self._families[family]

    def get_key(self, family, field):
        for entry in self.get_family(family):
            if entry.field == field:
                return entry.key
        raise KeyError(f'{family}/{field}')

    def __iter__(self):
        for entries in self._families.values():
            yield from entries

    def __contains__(self, key):
        return any(entry.key == key for entry in self)


DEFAULT_KEY_SCHEMA = KeySchema()

# full keys of the default schema, for callers matching annotations directly
LOAD_BALANCERS = DEFAULT_KEY_SCHEMA.get_key(RELATIONSHIPS_FAMILY, 'load_balancers')
SECURITY_GROUPS = DEFAULT_KEY_SCHEMA.get_key(RELATIONSHIPS_FAMILY, 'security_groups')
CLUSTER = DEFAULT_KEY_SCHEMA.get_key(MONIKER_FAMILY, 'cluster')
APPLICATION = DEFAULT_KEY_SCHEMA.get_key(MONIKER_FAMILY, 'app')
STACK = DEFAULT_KEY_SCHEMA.get_key(MONIKER_FAMILY, 'stack')
DETAIL = DEFAULT_KEY_SCHEMA.get_key(MONIKER_FAMILY, 'detail')
SEQUENCE = DEFAULT_KEY_SCHEMA.get_key(MONIKER_FAMILY, 'sequence')
TYPE = DEFAULT_KEY_SCHEMA.get_key(ARTIFACT_FAMILY, 'type')
NAME = DEFAULT_KEY_SCHEMA.get_key(ARTIFACT_FAMILY, 'name')
LOCATION = DEFAULT_KEY_SCHEMA.get_key(ARTIFACT_FAMILY, 'location')
VERSION = DEFAULT_KEY_SCHEMA.get_key(ARTIFACT_FAMILY, 'version')
