import os

import yaml

from manifest_annotations import logs


ENV_PREFIX = 'MANIFEST_ANNOTATIONS_'

# path to an optional yaml file with config values, keys as documented in DEFAULTS
CONFIG_FILE_ENV = f'{ENV_PREFIX}CONFIG'

DEFAULTS = {
    # domain suffix of the annotation key namespaces, e.g. moniker.<domain>/cluster
    'annotation-domain': 'spinnaker.io',
}


__CACHED_VALUES = None


def get(key=None, default=None, required=False):
    values = _get_cached_values()
    if key:
        if key in values:
            value = values[key]
        elif default is not None:
            value = default
        else:
            value = DEFAULTS.get(key)
    else:
        value = dict(DEFAULTS, **values)
    assert value or not required, f'config value is required for {key}'
    return value


def set(key=None, value=None, values=None):
    if key or value:
        assert key and value and not values, 'Invalid arguments: must specify both key and value args and not specify values arg'
        values = {key: value}
    assert values, 'Invalid arguments: no values to save'
    logs.debug('config/set', keys=','.join(values.keys()))
    _get_cached_values().update(**values)


def clear_cache():
    global __CACHED_VALUES
    __CACHED_VALUES = None


def _get_cached_values():
    global __CACHED_VALUES
    if __CACHED_VALUES is None:
        __CACHED_VALUES = _fetch()
    return __CACHED_VALUES


def _fetch():
    values = {}
    config_file = os.environ.get(CONFIG_FILE_ENV, '').strip()
    if config_file:
        logs.debug('loading config file', path=config_file)
        with open(config_file) as f:
            file_values = yaml.safe_load(f) or {}
        assert isinstance(file_values, dict), f'invalid config file, expected a mapping: {config_file}'
        values.update({str(k): v for k, v in file_values.items()})
    for key in DEFAULTS:
        env_value = os.environ.get(_get_env_name(key))
        if env_value:
            values[key] = env_value
    return values


def _get_env_name(key):
    return ENV_PREFIX + key.upper().replace('-', '_')
