# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import request


def request_payload() -> dict[str, Any]:
    """Body fields from a JSON object or a form-encoded body."""
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()


__all__ = ["request_payload"]
