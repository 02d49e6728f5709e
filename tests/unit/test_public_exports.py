from __future__ import annotations

import underbar


def test_package_exports_core_helpers():
    expected = {
        "throttle",
        "sort_by",
        "invoke",
        "flatten",
        "zip_",
        "intersection",
        "difference",
        "InvalidArgumentError",
    }
    assert expected.issubset(set(underbar.__all__))
    for name in underbar.__all__:
        assert hasattr(underbar, name)


def test_package_does_not_shadow_builtin_zip():
    assert "zip" not in underbar.__all__
    assert not hasattr(underbar, "zip")
