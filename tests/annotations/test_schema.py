import unittest

from manifest_annotations.annotations import constants, schema
from manifest_annotations.annotations.schema import KeySchema, DEFAULT_KEY_SCHEMA


class KeySchemaTestCase(unittest.TestCase):
    def test_default_keys(self):
        self.assertEqual(
            [entry.key for entry in DEFAULT_KEY_SCHEMA],
            [
                'relationships.spinnaker.io/loadBalancers',
                'relationships.spinnaker.io/securityGroups',
                'moniker.spinnaker.io/cluster',
                'moniker.spinnaker.io/application',
                'moniker.spinnaker.io/stack',
                'moniker.spinnaker.io/detail',
                'moniker.spinnaker.io/sequence',
                'artifact.spinnaker.io/type',
                'artifact.spinnaker.io/name',
                'artifact.spinnaker.io/location',
                'artifact.spinnaker.io/version',
            ]
        )

    def test_key_constants(self):
        self.assertEqual(schema.APPLICATION, 'moniker.spinnaker.io/application')
        self.assertEqual(schema.SEQUENCE, 'moniker.spinnaker.io/sequence')
        self.assertEqual(schema.LOAD_BALANCERS, 'relationships.spinnaker.io/loadBalancers')
        self.assertEqual(schema.VERSION, 'artifact.spinnaker.io/version')
        self.assertEqual(
            {schema.LOAD_BALANCERS, schema.SECURITY_GROUPS, schema.CLUSTER, schema.APPLICATION, schema.STACK,
             schema.DETAIL, schema.SEQUENCE, schema.TYPE, schema.NAME, schema.LOCATION, schema.VERSION},
            {entry.key for entry in DEFAULT_KEY_SCHEMA}
        )

    def test_families_have_distinct_namespaces(self):
        namespaces = {
            family: {entry.key.split('/')[0] for entry in DEFAULT_KEY_SCHEMA.get_family(family)}
            for family in DEFAULT_KEY_SCHEMA.families
        }
        for family, family_namespaces in namespaces.items():
            self.assertEqual(len(family_namespaces), 1, family)
        self.assertEqual(len({ns for family_namespaces in namespaces.values() for ns in family_namespaces}), 3)

    def test_custom_domain(self):
        custom_schema = KeySchema('example.com')
        self.assertEqual(custom_schema.domain, 'example.com')
        self.assertEqual(custom_schema.get_key(constants.MONIKER_FAMILY, 'cluster'), 'moniker.example.com/cluster')
        self.assertIn('artifact.example.com/type', custom_schema)
        self.assertNotIn(schema.TYPE, custom_schema)

    def test_invalid_domain(self):
        with self.assertRaises(AssertionError):
            KeySchema('example.com/foo')
        with self.assertRaises(AssertionError):
            KeySchema('')

    def test_unknown_family_or_field(self):
        with self.assertRaises(AssertionError):
            DEFAULT_KEY_SCHEMA.get_family('labels')
        with self.assertRaises(KeyError):
            DEFAULT_KEY_SCHEMA.get_key(constants.MONIKER_FAMILY, 'owner')
