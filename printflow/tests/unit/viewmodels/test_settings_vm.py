import pytest

from printflow.viewmodels.settings_vm import SettingsVM, default_settings_payload


def test_defaults_payload():
    payload = default_settings_payload()

    assert payload["labels_dir"] == "./Label_Data_Load"
    assert payload["printers_dir"] == "./Printers"
    assert payload["skip_unreadable"] is False
    assert "debug_logging" in payload


def test_apply_dict_coerces_values():
    vm = SettingsVM()

    vm.apply_dict(
        {
            "labels_dir": "  /data/labels ",
            "printers_dir": "/data/printers",
            "skip_unreadable": "yes",
            "debug_logging": 1,
        }
    )

    assert vm.labels_dir == "/data/labels"
    assert vm.printers_dir == "/data/printers"
    assert vm.skip_unreadable is True
    assert vm.debug_logging is True


def test_apply_dict_rejects_unknown_keys_and_bad_paths():
    vm = SettingsVM()

    with pytest.raises(ValueError):
        vm.apply_dict({"queue_dir": "/q"})
    with pytest.raises(ValueError):
        vm.apply_dict({"labels_dir": ""})
    with pytest.raises(ValueError):
        vm.apply_dict({"printers_dir": 3})
    with pytest.raises(ValueError):
        vm.apply_dict(["labels_dir"])  # type: ignore[arg-type]


def test_env_overrides_stay_out_of_saved_settings():
    saved = []
    vm = SettingsVM(on_save=saved.append)
    vm.apply_dict({"labels_dir": "/saved/labels", "printers_dir": "/saved/printers"})

    runtime = vm.runtime_config({"PRINTFLOW_LABELS_DIR": "/env/labels", "PRINTFLOW_PRINTERS_DIR": " "})
    vm.cmd_save()

    assert runtime.labels_dir == "/env/labels"
    assert runtime.printers_dir == "/saved/printers"
    assert vm.labels_dir == "/saved/labels"
    assert saved[0]["labels_dir"] == "/saved/labels"


def test_config_is_frozen_and_carries_debug_flag():
    vm = SettingsVM()
    vm.debug_logging = "on"

    assert vm.config.debug_logging is True
    with pytest.raises(AttributeError):
        vm.config.labels_dir = "/elsewhere"  # type: ignore[misc]


def test_cmd_save_emits_payload():
    saved = []
    vm = SettingsVM(on_save=saved.append)
    vm.labels_dir = "/l"

    vm.cmd_save()

    assert saved and saved[0]["labels_dir"] == "/l"
    assert set(saved[0]) == {"labels_dir", "printers_dir", "skip_unreadable", "debug_logging"}
