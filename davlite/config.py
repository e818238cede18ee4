"""
Connection parameters for the clients, read from a JSON config file
and/or environment variables.

A config file is a JSON object of named sections:

    {
        "default": {"username": "alice", "password": "secret"},
        "work": {"inherits": "default", "timeout": 60}
    }

Environment variables (DAVLITE_USERNAME, DAVLITE_PASSWORD,
DAVLITE_TIMEOUT, DAVLITE_VERIFY_SSL) take precedence over the file.
"""

import json
import logging
import os

CONNECTION_KEYS = ("username", "password", "timeout", "verify_ssl")


def config_section(config, section="default"):
    if section in config and "inherits" in config[section]:
        ret = config_section(config, config[section]["inherits"])
    else:
        ret = {}
    if section in config:
        ret.update(config[section])
    return ret


def read_config(fn):
    if not fn:
        cfgdir = f"{os.environ.get('HOME', '/')}/.config/"
        for config_file in (
            f"{cfgdir}/davlite/davlite.conf",
            f"{cfgdir}/davlite/davlite.json",
            "/etc/davlite/davlite.conf",
        ):
            cfg = read_config(config_file)
            if cfg:
                return cfg
        return None

    try:
        with open(fn, "rb") as config_file:
            return json.load(config_file)
    except FileNotFoundError:
        logging.info("no config file found")
    except ValueError:
        logging.error(f"config file {fn} is not valid json.  It will be ignored", exc_info=True)
    return {}


def _to_bool(value):
    if isinstance(value, str):
        return value.strip().lower() not in ("0", "no", "false", "off", "")
    return bool(value)


def get_connection_params(config_file=None, section="default", environment=True):
    """
    Collect keyword arguments for DAVClient / AsyncDAVClient.

    Only the keys found are returned, so client defaults apply for the rest.
    """
    params = {}
    config = read_config(config_file)
    if config:
        section_data = config_section(config, section)
        params.update({k: section_data[k] for k in CONNECTION_KEYS if k in section_data})

    if environment:
        for key in CONNECTION_KEYS:
            value = os.environ.get(f"DAVLITE_{key.upper()}")
            if value is not None:
                params[key] = value

    if "timeout" in params and params["timeout"] is not None:
        params["timeout"] = float(params["timeout"])
    if "verify_ssl" in params:
        params["verify_ssl"] = _to_bool(params["verify_ssl"])
    return params
