"""Shared fixtures: model behavior file text and fake vendor packages."""

import json

import pytest

from CRJ_Interaction_Fixer.Common import Print, Settings, Settings_class
from CRJ_Interaction_Fixer.File_Manager import Load_Modifications, Modification_Record

HEADER = (
    '<ModelInfo version="1.1" guid="{8d1a54e9-3bd8-4a2b-9e8f-0d9c7d4a1b11}">\r\n'
    "\t<LODS>\r\n"
    '\t\t<LOD minSize="0" ModelFile="CRJ550_Interior.bin"/>\r\n'
    "\t</LODS>\r\n"
    "</ModelInfo>"
)

SIMPLE_RECORD = Modification_Record(
    button_id="BTN1",
    knob_id="KNOB1",
    knob_anim_name="A",
    knob_change_name="B",
    push_anim_name="C",
    push_name="D",
)


def make_component_pair(record):
    """Return body xml for the button and knob components of one record."""
    return (
        '\t\t<Component ID="{button}" Node="{button}_node">\r\n'
        '\t\t\t<UseTemplate Name="ASOBO_GT_Push_Button">\r\n'
        "\t\t\t\t<ANIM_NAME>{button}_anim</ANIM_NAME>\r\n"
        "\t\t\t</UseTemplate>\r\n"
        "\t\t</Component>\r\n"
        '\t\t<Component ID="{knob}" Node="{knob}_node">\r\n'
        '\t\t\t<UseTemplate Name="OldTemplate" Extra="1">\r\n'
        "\t\t\t\t<ANIM_NAME>{knob}_anim</ANIM_NAME>\r\n"
        "\t\t\t\t<ANIM_LENGTH>36</ANIM_LENGTH>\r\n"
        "\t\t\t</UseTemplate>\r\n"
        "\t\t</Component>\r\n"
    ).format(button=record.button_id, knob=record.knob_id)


def make_interior_text(records=(SIMPLE_RECORD,), header=HEADER, with_body=True, declaration=True):
    """Return the text of a two-root interior model behavior file."""
    text = ""
    if declaration:
        text += '<?xml version="1.0" encoding="utf-8"?>\r\n'
    text += header + "\r\n"
    if with_body:
        text += "<ModelBehaviors>\r\n"
        text += '\t<Include ModelBehaviorFile="ASCRJ_Templates.xml"/>\r\n'
        text += '\t<Component ID="Cockpit">\r\n'
        for record in records:
            text += make_component_pair(record)
        text += "\t</Component>\r\n"
        text += "</ModelBehaviors>\r\n"
    return text


@pytest.fixture(autouse=True)
def reset_globals():
    """Restore the global Settings and Print state after each test."""
    yield
    for field, default in Settings.Get_Defaults().items():
        setattr(Settings, field, default)
    Settings.Reset()
    Print.quiet = False
    Print.logging_function = None


@pytest.fixture
def printed():
    """Capture Print output lines into a list."""
    lines = []
    Print.logging_function = lines.append
    return lines


@pytest.fixture
def interior_path(tmp_path):
    """A single interior file holding the BTN1/KNOB1 pair."""
    path = tmp_path / "source" / "CRJ550_Interior.xml"
    path.parent.mkdir(parents=True)
    path.write_bytes(make_interior_text().encode("utf-8"))
    return path


def build_vendor_package(packages_path, records, version="1.0.6", model_folders=None):
    """Create a fake vendor package under packages_path/Community."""
    package_path = packages_path / "Community" / "aerosoft-crj"
    (package_path / "ModelBehaviorDefs").mkdir(parents=True)
    (package_path / "manifest.json").write_text(
        json.dumps(
            {
                "dependencies": [],
                "content_type": "AIRCRAFT",
                "title": "Aerosoft CRJ",
                "package_version": version,
                "minimum_game_version": "1.19.8",
            }
        ),
        encoding="utf-8",
    )
    (package_path / "ModelBehaviorDefs" / "ASCRJ_Templates.xml").write_bytes(
        b"<ModelBehaviors>\r\n\t<Template Name=\"ASCRJ_Base\"/>\r\n</ModelBehaviors>\r\n"
    )

    if model_folders is None:
        model_folders = ["model", "model.freighter"]
    for airplane_id, file_name in [
        ("Aerosoft_CRJ_550", "CRJ550_Interior.xml"),
        ("Aerosoft_CRJ_700", "CRJ700_Interior.xml"),
    ]:
        airplane_path = package_path / "SimObjects" / "Airplanes" / airplane_id
        for folder in model_folders:
            (airplane_path / folder).mkdir(parents=True)
            (airplane_path / folder / file_name).write_bytes(
                make_interior_text(records).encode("utf-8")
            )
        # Non-model folders are ignored.
        (airplane_path / "texture").mkdir(parents=True)
    return package_path


@pytest.fixture
def catalog():
    """The embedded modification catalog."""
    return Load_Modifications()


@pytest.fixture
def packages_path(tmp_path, catalog):
    """A packages folder holding a vendor package matching the catalog."""
    packages_path = tmp_path / "Packages"
    build_vendor_package(packages_path, catalog)
    return packages_path


@pytest.fixture
def settings(packages_path):
    """A fresh settings object pointed at the fixture packages folder."""
    settings = Settings_class()
    settings(path_to_packages_folder=packages_path, prompt_on_start=False)
    return settings
