"""Unit tests for autoupdate.api.config.validate_output."""

import pytest

from autoupdate.api._output_schemas._registry import output_schema
from autoupdate.api._output_schemas.service import ServiceStopOutput
from autoupdate.api.config.validate_output import command_id, validate_output
from autoupdate.api.service.cmd_status import cmd_status
from autoupdate.api.service.cmd_stop import cmd_stop


def test_command_id():
    assert command_id(cmd_status) == "service.status"
    assert command_id(test_command_id) is None


def test_valid_output_is_normalised():
    output = validate_output(cmd_stop, {"message": "Autoupdate stopped successfully", "stopped": True})
    assert output == {"errors": [], "warnings": [], "message": "Autoupdate stopped successfully", "stopped": True}


def test_invalid_output_names_fields():
    with pytest.raises(ValueError, match="stopped"):
        validate_output(cmd_stop, {"message": "done"})


def test_unknown_keys_rejected():
    with pytest.raises(ValueError, match="ServiceStopOutput"):
        validate_output(cmd_stop, {"message": "done", "stopped": True, "label": "x"})


def test_non_command_passes_through():
    output = {"anything": 1}
    assert validate_output(test_non_command_passes_through, output) is output


def test_duplicate_registration():
    with pytest.raises(ValueError, match="already registered"):
        output_schema("service.stop")(ServiceStopOutput)
