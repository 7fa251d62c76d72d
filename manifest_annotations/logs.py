from logging import CRITICAL, ERROR, WARNING, INFO, DEBUG, getLevelName
import datetime
import io
import os
import sys

import yaml
from ruamel.yaml import YAML


def strtobool(value):
    value = value.lower().strip()
    if value in ('y', 'yes', 't', 'true', 'on', '1'):
        return True
    elif value in ('n', 'no', 'f', 'false', 'off', '0', ''):
        return False
    raise ValueError(f'invalid truth value: {value}')


MANIFEST_ANNOTATIONS_DEBUG = strtobool(os.environ.get('MANIFEST_ANNOTATIONS_DEBUG', 'n'))
MANIFEST_ANNOTATIONS_DEBUG_FILE = os.environ.get('MANIFEST_ANNOTATIONS_DEBUG_FILE', '').strip()
MANIFEST_ANNOTATIONS_DEBUG_VERBOSE = strtobool(os.environ.get('MANIFEST_ANNOTATIONS_DEBUG_VERBOSE', 'n'))

DEBUG_VERBOSE = 'verbose debug'


def info(*args, **kwargs):
    log(INFO, *args, **kwargs)


def debug(*args, **kwargs):
    log(DEBUG, *args, **kwargs)


def debug_verbose(*args, **kwargs):
    log(DEBUG_VERBOSE, _ruamel_dump([list(args), kwargs]))


def warning(*args, **kwargs):
    log(WARNING, *args, **kwargs)


def error(*args, **kwargs):
    log(ERROR, *args, **kwargs)


def critical(*args, **kwargs):
    log(CRITICAL, *args, **kwargs)


def log(level, *args, **kwargs):
    if not _skip_log_level(level):
        _print_log_msg(level, _get_log_msg(level, *args, **kwargs))


def set_debug(enabled=True, verbose=False):
    global MANIFEST_ANNOTATIONS_DEBUG, MANIFEST_ANNOTATIONS_DEBUG_VERBOSE
    MANIFEST_ANNOTATIONS_DEBUG = enabled
    MANIFEST_ANNOTATIONS_DEBUG_VERBOSE = verbose


def exit_catastrophic_failure(exitcode=1, quiet=False):
    if not quiet:
        critical('Catastrophic Failure!')
    sys.exit(exitcode)


# yaml dumping


def print_yaml_dump(data):
    yaml.dump(data, sys.stdout, Dumper=YamlSafeDumper, default_flow_style=False)


def yaml_dump(data, *args, **kwargs):
    return yaml.dump(data, *args, Dumper=YamlSafeDumper, default_flow_style=False, **kwargs)


class YamlSafeDumper(yaml.SafeDumper):

    def ignore_aliases(self, data):
        return True

    def represent_undefined(self, data):
        return None


# private functions


def _ruamel_dump(data):
    dumper = YAML(typ='safe', pure=True)
    dumper.default_flow_style = False
    stream = io.StringIO()
    dumper.dump(data, stream)
    return stream.getvalue()


def _get_log_msg(level, *args, **kwargs):
    msg = datetime.datetime.now().strftime('%Y-%m-%d %H:%M') + ' ' + _get_level_name(level) + ' '
    if len(kwargs) > 0:
        msg += '(' + ','.join([f'{k}="{v}"' for k, v in kwargs.items()]) + ') '
    msg += ' '.join(str(arg) for arg in args)
    return msg


def _get_level_name(level):
    if level == DEBUG_VERBOSE:
        return getLevelName(DEBUG)
    else:
        return getLevelName(level)


def _skip_log_level(level):
    return (
           (level == DEBUG and not MANIFEST_ANNOTATIONS_DEBUG and not MANIFEST_ANNOTATIONS_DEBUG_FILE)
        or (level == DEBUG_VERBOSE and not MANIFEST_ANNOTATIONS_DEBUG_VERBOSE and not MANIFEST_ANNOTATIONS_DEBUG_FILE)
    )


def _print_log_msg(level, msg):
    if MANIFEST_ANNOTATIONS_DEBUG_FILE:
        with open(MANIFEST_ANNOTATIONS_DEBUG_FILE, 'a') as f:
            print(msg, file=f)
    if (
        (level == DEBUG and (MANIFEST_ANNOTATIONS_DEBUG or MANIFEST_ANNOTATIONS_DEBUG_VERBOSE))
        or (level == DEBUG_VERBOSE and MANIFEST_ANNOTATIONS_DEBUG_VERBOSE)
        or level not in [DEBUG, DEBUG_VERBOSE]
    ):
        print(msg, file=sys.stderr)
        sys.stderr.flush()
