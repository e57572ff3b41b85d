# blueprint_library.py
"""
A catalog of blueprints loaded from a directory of schematic files.

Files are keyed by base name, e.g. house_wooden_small.schem -> "house_wooden_small",
and looked up by name, style and size with progressively looser matching.
"""

import logging
import os

from blueprint import load_json
from schem_archive import SUPPORTED_EXTENSIONS, load_blueprint
from schem_errors import SchematicError

logger = logging.getLogger(__name__)

DEFAULT_SCHEMATICS_DIR = "./schematics"


class BlueprintLibrary:
    def __init__(self):
        self.blueprints = {}

    def __len__(self):
        return len(self.blueprints)

    def __contains__(self, key):
        return key in self.blueprints

    def names(self):
        return list(self.blueprints)

    def add(self, blueprint, key=None):
        self.blueprints[key or blueprint.name] = blueprint

    def load_from_directory(self, directory=DEFAULT_SCHEMATICS_DIR, legacy_ids=None):
        """
        Load every schematic (and saved .json blueprint) in `directory`.

        A file that fails to decode is logged and skipped. Returns the number of
        blueprints loaded.
        """
        loaded = 0
        for filename in sorted(os.listdir(directory)):
            path = os.path.join(directory, filename)
            key, ext = os.path.splitext(filename)
            ext = ext.lower()
            if not os.path.isfile(path) or (ext not in SUPPORTED_EXTENSIONS and ext != ".json"):
                continue

            try:
                if ext == ".json":
                    blueprint = load_json(path)
                else:
                    blueprint = load_blueprint(path, legacy_ids=legacy_ids)
            except SchematicError as err:
                logger.error("Failed to load schematic %s: %s", filename, err)
                continue

            self.add(blueprint, key)
            loaded += 1

        logger.info("Loaded %d blueprints from %s", loaded, directory)
        return loaded

    def get(self, name, style="default", size="small"):
        exact_key = f"{name}_{style}_{size}"
        if exact_key in self.blueprints:
            return self.blueprints[exact_key]

        partial_key = f"{name}_{style}"
        for key, blueprint in self.blueprints.items():
            if key.startswith(partial_key):
                return blueprint

        for key, blueprint in self.blueprints.items():
            if key.startswith(name):
                return blueprint

        return None
