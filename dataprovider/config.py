# dataprovider/config.py
#
# Client configuration file:
#
# name_of_the_client:
#   url: "http://test.com/api"
#   resources:
#     - name: endpoint 1
#       resource: /ep1
#       fields:
#         - name: field_1_name
#         - name: field_2_name
#
import logging
from dataclasses import dataclass, field
from typing import Dict, List

import yaml

from .exceptions import ConfigError
from .models import Resource

logger = logging.getLogger(__name__)

@dataclass
class FieldConfig:
    name: str

@dataclass
class ResourceConfig:
    name: str
    resource: str
    fields: List[FieldConfig] = field(default_factory=list)

    def to_resource(self) -> Resource:
        return Resource(self.resource)

@dataclass
class ClientConfig:
    name: str
    url: str
    resources: List[ResourceConfig] = field(default_factory=list)

    def get_resource(self, name: str) -> ResourceConfig:
        for resource in self.resources:
            if resource.name == name:
                return resource
        raise ConfigError(f"Client '{self.name}' has no resource named '{name}'")


def load_config(file_path: str) -> Dict[str, ClientConfig]:
    """Load every client defined in a YAML configuration file"""
    try:
        with open(file_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {file_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {file_path}: {e}") from e

    clients = parse_config(raw or {})
    logger.info("Loaded %d client(s) from %s", len(clients), file_path)
    return clients


def parse_config(raw: Dict) -> Dict[str, ClientConfig]:
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping of client name to client settings")

    clients = {}
    for client_name, settings in raw.items():
        if not isinstance(settings, dict) or "url" not in settings:
            raise ConfigError(f"Client '{client_name}' requires a 'url'")

        resources = []
        for entry in settings.get("resources") or []:
            if not isinstance(entry, dict) or "resource" not in entry:
                raise ConfigError(f"Client '{client_name}' has a resource without a 'resource' path")
            resources.append(ResourceConfig(
                name=str(entry.get("name", entry["resource"])),
                resource=str(entry["resource"]),
                fields=[FieldConfig(name=str(f["name"])) for f in entry.get("fields") or []
                        if isinstance(f, dict) and "name" in f],
            ))

        clients[client_name] = ClientConfig(
            name=str(client_name),
            url=str(settings["url"]),
            resources=resources,
        )
    return clients
