import pytest

from doc_model import Tag
from link_resolver import ResolutionErrorCode, element_id, generate_docs
from type_model import TypeModel

from conftest import BROKEN, LINK_LABEL, SAME_TYPE_METHOD, VERTX


class TestGenerateDocs:
    """Przebieg generacji dla całego modelu"""

    def test_all_links_resolved(self, model):
        report = generate_docs(model)
        assert report.is_valid
        assert report.errors == []
        assert f"{SAME_TYPE_METHOD}#m()" in report.docs
        assert VERTX in report.docs
        for doc in report.docs.values():
            assert all(link.is_resolved for link in doc.links())

    def test_type_comment(self, model):
        doc = generate_docs(model).docs[VERTX]
        assert doc.first_sentence.value == "The entry point."
        assert doc.body.value == "Use {@link #deployVerticle(String)} to deploy."
        see = doc.block_tags[0]
        assert see.name == "see"
        assert str(see.element) == "io.vertx.core.DeploymentOptions"

    def test_elements_without_comment_are_skipped(self, model):
        report = generate_docs(model)
        assert f"{VERTX}#setTimer(long,io.vertx.core.Handler)" not in report.docs
        assert "io.vertx.core.DeploymentOptions" not in report.docs

    def test_failure_does_not_stop_other_elements(self, broken_model):
        report = generate_docs(broken_model)
        assert not report.is_valid
        assert report.failed_elements == [f"{BROKEN}#m()"]
        assert [e.code for e in report.errors] == [
            ResolutionErrorCode.NOT_FOUND,
            ResolutionErrorCode.NOT_FOUND,
        ]
        assert [e.raw_target for e in report.errors] == [" #nope()", " Missing"]
        assert f"{BROKEN}#m()" not in report.docs
        assert BROKEN in report.docs
        assert f"{BROKEN}#n()" in report.docs

    def test_restrict_to_types(self, broken_model):
        report = generate_docs(broken_model, [LINK_LABEL])
        assert report.is_valid
        assert list(report.docs) == [f"{LINK_LABEL}#m()"]

    def test_unknown_type_filter(self, model):
        with pytest.raises(KeyError):
            generate_docs(model, ["io.vertx.Missing"])

    def test_element_id(self, model):
        t = model.lookup_type(VERTX)
        assert element_id(t) == VERTX
        assert element_id(t, "close()") == f"{VERTX}#close()"


class TestBlockTagInlineLinks:
    """Linki inline w wartościach tagów blokowych (@return, @param)"""

    @pytest.fixture
    def return_model(self):
        return TypeModel.from_dict({
            "types": [
                {
                    "name": "a.B",
                    "methods": [
                        {"name": "m", "comment": "Does it.\n@return the {@link #nope()} value"},
                        {"name": "n", "comment": "Does it.\n@param x see {@link #m()}"},
                    ],
                },
            ]
        })

    def test_bad_link_in_return_fails_element(self, return_model):
        report = generate_docs(return_model)
        assert not report.is_valid
        assert report.failed_elements == ["a.B#m()"]
        assert [e.raw_target for e in report.errors] == [" #nope()"]
        assert "a.B#m()" not in report.docs

    def test_link_in_param_is_resolved(self, return_model):
        doc = generate_docs(return_model).docs["a.B#n()"]
        param = doc.block_tags[0]
        assert param == Tag("param", "x see {@link #m()}")
        [link] = param.inline_links()
        assert link.element.signature == "m()"
        assert [str(link.element) for link in doc.links()] == ["m()"]
