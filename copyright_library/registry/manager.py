"""Copyright profile registry.

Owns the project's copyright profiles, the ordered scope → profile mapping
and the default profile, and resolves files to the profile that applies.

Persisted layout (copyright directory):
    profiles_settings.xml         # mappings, default profile, language options
    {profile name}.xml            # one record per profile
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable
from pathlib import Path

from copyright_library.errors import InvalidDataError
from copyright_library.errors import WriteExternalError
from copyright_library.file_types import FileTypeRegistry
from copyright_library.models.options import FileTypeOverride
from copyright_library.models.options import Options
from copyright_library.models.profiles import PROFILE_TAG
from copyright_library.models.profiles import CopyrightProfile
from copyright_library.schemes import InitializedSchemeWrapper
from copyright_library.schemes import SchemeManager
from copyright_library.storage.scheme_store import SETTINGS_FILE_NAME
from copyright_library.storage.scheme_store import SchemeStore
from copyright_library.storage.xml_store import load_xml
from copyright_library.storage.xml_store import save_xml

logger = logging.getLogger(__name__)

COMPONENT_NAME = "CopyrightManager"
SETTINGS = "settings"
DEFAULT = "default"
MODULE2COPYRIGHT = "module2copyright"
ELEMENT = "element"
MODULE = "module"
COPYRIGHT = "copyright"
UNKNOWN_FILE_TYPE = "UNKNOWN"

ScopeLookup = Callable[[str], Callable[[Path], bool] | None]


def wrap_state(element: ET.Element) -> ET.Element:
    """Wrap an element in the component envelope."""
    wrapper = ET.Element("component", name=COMPONENT_NAME)
    wrapper.append(element)
    return wrapper


def write_profile(profile: CopyrightProfile) -> ET.Element:
    return wrap_state(profile.to_element())


def read_profile_name(record: ET.Element) -> str | None:
    option = record.find(f"{PROFILE_TAG}/option[@name='name']")
    return option.get("value") if option is not None else None


def create_scheme_manager(store: SchemeStore) -> SchemeManager[CopyrightProfile]:
    return SchemeManager(
        store,
        writer=write_profile,
        reader=CopyrightProfile.from_element,
        sub_state_tag=PROFILE_TAG,
        name_reader=read_profile_name,
    )


class CopyrightManager:
    """Per-project registry of copyright profiles and their scope assignments.

    Mutation and resolution are expected from a single coordinating thread;
    only lazy profile loading is safe to race.
    """

    def __init__(
        self,
        storage_dir: Path,
        scope_lookup: ScopeLookup,
        file_types: FileTypeRegistry | None = None,
        load: bool = True,
    ) -> None:
        """Initialize copyright manager.

        Args:
            storage_dir: Directory holding profiles_settings.xml and profile records
            scope_lookup: Returns the file predicate for a scope name, or None
            file_types: File type lookup (default: built-in file types)
            load: Load persisted profiles and settings immediately
        """
        self.storage_dir = Path(storage_dir)
        self.settings_path = self.storage_dir / SETTINGS_FILE_NAME
        self.scope_lookup = scope_lookup
        self.file_types = file_types or FileTypeRegistry()

        self.default_copyright_name: str | None = None
        self.scope_to_copyright: dict[str, str] = {}
        self.options = Options()

        self.scheme_manager = create_scheme_manager(SchemeStore(self.storage_dir))

        if load:
            self.load()

    # --- Default profile ---

    @property
    def default_copyright(self) -> CopyrightProfile | None:
        if self.default_copyright_name is None:
            return None
        wrapper = self.scheme_manager.find_scheme_by_name(self.default_copyright_name)
        return wrapper.scheme if wrapper is not None else None

    @default_copyright.setter
    def default_copyright(self, profile: CopyrightProfile | None) -> None:
        self.default_copyright_name = profile.name if profile is not None else None

    # --- Scope mappings ---

    def map_copyright(self, scope_name: str, profile_name: str) -> None:
        """Assign a profile to a scope; the profile need not exist yet."""
        self.scope_to_copyright[scope_name] = profile_name

    def unmap_copyright(self, scope_name: str) -> None:
        self.scope_to_copyright.pop(scope_name, None)

    def clear_mappings(self) -> None:
        self.scope_to_copyright.clear()

    def has_any_copyrights(self) -> bool:
        return self.default_copyright_name is not None or bool(self.scope_to_copyright)

    # --- Profiles ---

    def add_copyright(self, profile: CopyrightProfile) -> None:
        self.scheme_manager.add_scheme(InitializedSchemeWrapper(profile, write_profile))

    def get_copyrights(self) -> list[CopyrightProfile]:
        """All profiles; records that fail to load are logged and left out."""
        profiles = []
        for wrapper in self.scheme_manager.all_schemes:
            try:
                profiles.append(wrapper.scheme)
            except InvalidDataError as e:
                logger.error(str(e))
        return profiles

    def find_copyright(self, name: str) -> CopyrightProfile | None:
        wrapper = self.scheme_manager.find_scheme_by_name(name)
        return wrapper.scheme if wrapper is not None else None

    def remove_copyright(self, profile: CopyrightProfile) -> None:
        """Remove a profile and every scope mapping that points at it."""
        self.scheme_manager.remove_scheme(profile.name)

        for scope_name in [s for s, p in self.scope_to_copyright.items() if p == profile.name]:
            del self.scope_to_copyright[scope_name]

    def replace_copyright(self, name: str, profile: CopyrightProfile) -> None:
        """Overwrite the named profile in place, or add `profile` if there is none."""
        existing = self.scheme_manager.find_scheme_by_name(name)
        if existing is None:
            self.add_copyright(profile)
        else:
            existing.scheme.copy_from(profile)

    # --- Resolution ---

    def get_copyright_options(self, file: Path) -> CopyrightProfile | None:
        """Resolve the profile that applies to a file.

        Scope mappings are tried in insertion order. A matching scope whose
        profile no longer exists is skipped and the search continues.

        Returns:
            Matching profile, the default profile, or None when the file type
            opted out of notices
        """
        file_type = self.file_types.get_file_type(file)
        type_name = file_type.name if file_type is not None else UNKNOWN_FILE_TYPE
        if self.options.get_options(type_name).file_type_override == FileTypeOverride.NO_COPYRIGHT:
            return None

        for scope_name, profile_name in self.scope_to_copyright.items():
            predicate = self.scope_lookup(scope_name)
            if predicate is None or not predicate(Path(file)):
                continue
            wrapper = self.scheme_manager.find_scheme_by_name(profile_name)
            if wrapper is not None:
                return wrapper.scheme
            logger.debug(f"Scope '{scope_name}' maps to missing profile '{profile_name}'")

        return self.default_copyright

    # --- Persistence ---

    def get_state(self) -> ET.Element | None:
        """Serialize mappings, options and the default profile name.

        Returns:
            Settings wrapped in the component envelope, or None if the
            options could not be written
        """
        result = ET.Element(SETTINGS)
        try:
            if self.scope_to_copyright:
                mapping = ET.SubElement(result, MODULE2COPYRIGHT)
                for scope_name, profile_name in self.scope_to_copyright.items():
                    ET.SubElement(mapping, ELEMENT, {MODULE: scope_name, COPYRIGHT: profile_name})

            self.options.write_external(result)
        except WriteExternalError as e:
            logger.error(f"Failed to write copyright settings: {e}")
            return None

        if self.default_copyright_name is not None:
            result.set(DEFAULT, self.default_copyright_name)

        return wrap_state(result)

    def load_state(self, state: ET.Element) -> None:
        """Restore mappings, default profile name and options.

        Accepts the component envelope or a bare settings element. Failures
        are logged; whatever was restored before them is kept.
        """
        data = state if state.tag == SETTINGS else state.find(SETTINGS)
        if data is None:
            logger.error(f"No <{SETTINGS}> element in copyright state")
            return

        module_to_copyright = data.find(MODULE2COPYRIGHT)
        if module_to_copyright is not None:
            for element in module_to_copyright.findall(ELEMENT):
                scope_name = element.get(MODULE)
                profile_name = element.get(COPYRIGHT)
                if scope_name is None or profile_name is None:
                    logger.warning(f"Skipping incomplete mapping entry: {element.attrib}")
                    continue
                self.scope_to_copyright[scope_name] = profile_name

        try:
            self.default_copyright_name = data.get(DEFAULT)
            self.options.read_external(data)
        except InvalidDataError as e:
            logger.error(f"Failed to read copyright settings: {e}")

    def load(self) -> None:
        """Load profile records and profiles_settings.xml from the storage directory."""
        self.scheme_manager.load_schemes()

        state = load_xml(self.settings_path)
        if state is not None:
            self.load_state(state)

    def save(self) -> None:
        """Persist settings and changed profile records.

        Errors are logged; nothing is raised to the caller.
        """
        state = self.get_state()
        if state is not None:
            try:
                save_xml(self.settings_path, state)
            except RuntimeError as e:
                logger.error(str(e))

        self.scheme_manager.save()
