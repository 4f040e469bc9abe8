from material_tracker.errors import AddressingError, TrackerError, ValidationError


def test_status_codes_default_per_class_and_can_be_overridden():
    assert TrackerError("boom").status_code == 400
    assert ValidationError("missing").status_code == 422
    assert AddressingError("gone").status_code == 404

    err = AddressingError("gone", status_code=410)
    assert (err.status_code, err.message, str(err)) == (410, "gone", "gone")
    assert AddressingError.status_code == 404
