import logging

import pytest


# enum inside a block-scoped namespace
NAMESPACE_LINES = [
    "namespace N",
    "{",
    "    enum Color",
    "    {",
    "        Red,",
    "        Green = 2, //ok",
    "    }",
    "}",
]

CANONICAL_SOURCE = """using System;

namespace Demo
{
    public enum Color
    {
        Red,
        Green = 2, //ok
    }
}
"""

UNITY_SOURCE = """using System;
using UnityEngine;

namespace Game.Data
{
    public class Holder : MonoBehaviour
    {
        public enum State
        {
            Idle,
            Running = 5, // fast
        }

        void Update()
        {
            if (true) { }
        }
    }

    public enum Color
    {
        Red,
        Green = 2, //ok
        // Blue,
    }
}
"""


@pytest.fixture
def namespace_lines():
    return list(NAMESPACE_LINES)


@pytest.fixture
def unity_lines():
    return UNITY_SOURCE.splitlines()


@pytest.fixture
def canonical_file(tmp_path):
    path = tmp_path / "Types.cs"
    path.write_text(CANONICAL_SOURCE, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("enum_editor")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
