from collections import namedtuple


# ownership and naming of a resource, every resource deployed through the annotater must have one
Moniker = namedtuple('Moniker', ['app', 'cluster', 'stack', 'detail', 'sequence'], defaults=(None,) * 5)

# the artifact the resource was deployed from
Artifact = namedtuple('Artifact', ['type', 'name', 'location', 'version'], defaults=(None,) * 4)

# ordered references to load balancers and security groups fronting the resource
Relationships = namedtuple('Relationships', ['load_balancers', 'security_groups'], defaults=(None,) * 2)
