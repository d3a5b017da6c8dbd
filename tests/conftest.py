import pytest

from type_model import TypeModel

SAME_TYPE_METHOD = "io.vertx.test.codegen.doc.LinkToMethodInSameType"
SAME_TYPE        = "io.vertx.test.codegen.doc.LinkToSameType"
LINK_LABEL       = "io.vertx.test.codegen.doc.LinkLabel"
VERTX            = "io.vertx.core.Vertx"

MODEL_DATA = {
    "types": [
        {
            "name": SAME_TYPE_METHOD,
            "kind": "interface",
            "methods": [
                {
                    "name": "m",
                    "comment": (
                        "{@link #method(String, int)}"
                        "{@link #method(java.lang.String, int)}"
                        "{@link #method(String,int)}"
                        "{@link #method(java.lang.String,int)}"
                    ),
                },
                {"name": "method", "params": ["java.lang.String", "int"]},
                {"name": "method", "params": ["java.lang.String"]},
            ],
        },
        {
            "name": SAME_TYPE,
            "kind": "interface",
            "methods": [
                {
                    "name": "m",
                    "comment": (
                        "{@link LinkToSameType}"
                        "{@link io.vertx.test.codegen.doc.LinkToSameType}"
                    ),
                },
            ],
        },
        {
            "name": LINK_LABEL,
            "kind": "interface",
            "methods": [
                {
                    "name": "m",
                    "comment": "{@link #m()}{@link #m()   }{@link #m() the label value}",
                },
            ],
        },
        {
            "name": VERTX,
            "kind": "interface",
            "comment": (
                "The entry point.\n"
                "\n"
                "Use {@link #deployVerticle(String)} to deploy.\n"
                "@see io.vertx.core.DeploymentOptions"
            ),
            "methods": [
                {"name": "close", "comment": "Closes the instance."},
                {"name": "deployVerticle", "params": ["java.lang.String"]},
                {
                    "name": "deployVerticle",
                    "params": ["java.lang.String", "io.vertx.core.DeploymentOptions"],
                },
                {
                    "name": "setTimer",
                    "params": ["long", "io.vertx.core.Handler<java.lang.Long>"],
                },
                {"name": "executeBlocking", "params": ["java.lang.Object..."]},
            ],
        },
        {"name": "io.vertx.core.DeploymentOptions"},
        {"name": "io.vertx.core.Handler", "kind": "interface"},
        {"name": "io.vertx.other.Handler"},
    ]
}

BROKEN = "io.vertx.test.codegen.doc.Broken"

BROKEN_DATA = {
    "types": MODEL_DATA["types"] + [
        {
            "name": BROKEN,
            "comment": "Fine {@link io.vertx.core.Vertx}.",
            "methods": [
                {
                    "name": "m",
                    "comment": "See {@link #nope()} and {@link Missing}.",
                },
                {"name": "n", "comment": "{@link #m()}"},
            ],
        },
    ]
}


@pytest.fixture
def model_data():
    return MODEL_DATA


@pytest.fixture
def model():
    return TypeModel.from_dict(MODEL_DATA)


@pytest.fixture
def broken_model():
    return TypeModel.from_dict(BROKEN_DATA)
