"""Tests for building the complete patch package."""

import json

import pytest

from CRJ_Interaction_Fixer.Common import (
    Malformed_Source_Document_Exception,
    Package_Missing_Exception,
    Package_Version_Exception,
)
from CRJ_Interaction_Fixer.File_Manager import Read_Model_Behavior_File
from CRJ_Interaction_Fixer.File_Manager.Package_Files import Read_Data_Text
from CRJ_Interaction_Fixer.Transforms import Build_Patch_Package
from CRJ_Interaction_Fixer.Transforms.Patch_Package import (
    Check_Original_Package,
    template_fragment_path,
)

from tests.conftest import build_vendor_package

ORIGINAL_TEMPLATES = b"<ModelBehaviors>\r\n\t<Template Name=\"ASCRJ_Base\"/>\r\n</ModelBehaviors>\r\n"


class TestCheckOriginalPackage:
    """Test the vendor package presence and version checks."""

    def test_returns_manifest(self, packages_path, settings) -> None:
        manifest = Check_Original_Package(packages_path / "Community" / "aerosoft-crj", settings)
        assert manifest["package_version"] == "1.0.6"

    def test_missing_directory(self, tmp_path, settings) -> None:
        with pytest.raises(Package_Missing_Exception, match="aerosoft-crj"):
            Check_Original_Package(tmp_path / "aerosoft-crj", settings)

    def test_missing_manifest(self, tmp_path, settings) -> None:
        (tmp_path / "aerosoft-crj").mkdir()
        with pytest.raises(Package_Missing_Exception, match="manifest.json"):
            Check_Original_Package(tmp_path / "aerosoft-crj", settings)

    def test_version_mismatch(self, tmp_path, catalog, settings) -> None:
        package_path = build_vendor_package(tmp_path / "Other", catalog, version="1.0.5")
        with pytest.raises(Package_Version_Exception, match="1.0.5"):
            Check_Original_Package(package_path, settings)

    def test_version_mismatch_allowed(self, tmp_path, catalog, settings, printed) -> None:
        package_path = build_vendor_package(tmp_path / "Other", catalog, version="1.0.5")
        settings.allow_version_mismatch = True
        Check_Original_Package(package_path, settings)
        assert any(x.startswith("Warning:") for x in printed)


class TestBuildPatchPackage:
    """Test the full build against a fake packages folder."""

    def test_build_outputs(self, packages_path, settings, catalog) -> None:
        patch_path = Build_Patch_Package(settings)
        assert patch_path == packages_path / "Community" / "aerosoft-crj-interaction-fix"

        for airplane_id, file_name in settings.aircraft_variants:
            for folder in ["model", "model.freighter"]:
                path = patch_path / "SimObjects" / "Airplanes" / airplane_id / folder / file_name
                body_root = Read_Model_Behavior_File(path).body_root
                ids = [x.get("ID") for x in body_root.iter("Component")]
                assert ids == ["Cockpit"] + [x.knob_id for x in catalog]

    def test_templates_file_gets_fragment(self, packages_path, settings) -> None:
        patch_path = Build_Patch_Package(settings)
        templates = (patch_path / "ModelBehaviorDefs" / "ASCRJ_Templates.xml").read_bytes()
        fragment = Read_Data_Text(template_fragment_path).encode("utf-8")
        assert templates == ORIGINAL_TEMPLATES + fragment

    def test_original_package_unchanged(self, packages_path, settings) -> None:
        original_path = packages_path / "Community" / "aerosoft-crj"
        before = sorted(x.as_posix() for x in original_path.rglob("*"))
        Build_Patch_Package(settings)
        assert sorted(x.as_posix() for x in original_path.rglob("*")) == before
        assert (original_path / "ModelBehaviorDefs" / "ASCRJ_Templates.xml").read_bytes() == (
            ORIGINAL_TEMPLATES
        )

    def test_layout(self, packages_path, settings) -> None:
        patch_path = Build_Patch_Package(settings)
        layout = json.loads((patch_path / "layout.json").read_text(encoding="utf-8"))
        paths = [x["path"] for x in layout["content"]]
        assert paths == sorted(paths)
        assert "layout.json" not in paths
        assert "manifest.json" not in paths
        assert "ModelBehaviorDefs/ASCRJ_Templates.xml" in paths
        assert "SimObjects/Airplanes/Aerosoft_CRJ_700/model.freighter/CRJ700_Interior.xml" in paths
        for entry in layout["content"]:
            assert entry["size"] == (patch_path / entry["path"]).stat().st_size
            assert entry["date"] > 116444736000000000

    def test_manifest(self, packages_path, settings) -> None:
        patch_path = Build_Patch_Package(settings)
        manifest = json.loads((patch_path / "manifest.json").read_text(encoding="utf-8"))
        assert manifest["dependencies"] == [{"name": "aerosoft-crj", "package_version": "1.0.6"}]
        assert manifest["title"] == "Aerosoft CRJ Cockpit Interaction Fix"
        assert manifest["package_version"] == "1.0.0"
        assert manifest["minimum_game_version"] == "1.19.8"

    def test_rebuild_removes_stale_files(self, packages_path, settings) -> None:
        patch_path = Build_Patch_Package(settings)
        stale = patch_path / "stale.txt"
        stale.write_text("old")
        Build_Patch_Package(settings)
        assert not stale.exists()

    def test_official_source(self, tmp_path, catalog) -> None:
        from CRJ_Interaction_Fixer.Common import Settings_class

        packages_path = tmp_path / "Packages"
        package_path = build_vendor_package(packages_path, catalog)
        official_path = packages_path / "Official" / "OneStore" / "aerosoft-crj"
        official_path.parent.mkdir(parents=True)
        package_path.rename(official_path)

        settings = Settings_class()
        settings(path_to_packages_folder=packages_path, package_source="Official")
        patch_path = Build_Patch_Package(settings)
        assert patch_path == packages_path / "Community" / "aerosoft-crj-interaction-fix"
        assert (patch_path / "manifest.json").exists()

    def test_missing_package(self, tmp_path, settings) -> None:
        settings(path_to_packages_folder=tmp_path / "Empty")
        with pytest.raises(Package_Missing_Exception):
            Build_Patch_Package(settings)

    def test_malformed_source_writes_no_model_file(self, packages_path, settings) -> None:
        source = (
            packages_path / "Community" / "aerosoft-crj" / "SimObjects" / "Airplanes"
            / "Aerosoft_CRJ_550" / "model" / "CRJ550_Interior.xml"
        )
        source.write_text('<ModelInfo version="1.1"/>\r\n', encoding="utf-8")
        with pytest.raises(Malformed_Source_Document_Exception, match="CRJ550_Interior.xml"):
            Build_Patch_Package(settings)
        patch_path = packages_path / "Community" / "aerosoft-crj-interaction-fix"
        assert not list(patch_path.rglob("*_Interior.xml"))
