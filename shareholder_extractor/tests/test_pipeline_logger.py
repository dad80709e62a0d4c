"""Tests for shareholder_extractor.core.pipeline_logger module."""

import logging

from shareholder_extractor.core.pipeline_logger import _describe, get_logger, reset_logger


class TestGetLogger:
    """Tests for the shared logger accessor."""

    def test_singleton(self):
        assert get_logger() is get_logger()

    def test_verbose_upgrade(self):
        assert not get_logger().verbose
        logger = get_logger(verbose=True)
        assert logger.verbose
        assert logger.logger.handlers[0].level == logging.DEBUG

    def test_verbose_never_downgraded(self):
        get_logger(verbose=True)
        assert get_logger(verbose=False).verbose

    def test_log_dir_set_later(self, tmp_path):
        get_logger()
        assert get_logger(log_dir=tmp_path).log_dir == tmp_path

    def test_reset_removes_handlers(self):
        logger = get_logger()
        reset_logger()
        assert logger.logger.handlers == []
        assert get_logger() is not logger


class TestDocumentLogging:
    """Per-document start/end messages and file output."""

    def test_file_log(self, tmp_path):
        logger = get_logger(log_dir=tmp_path)
        logger.start_document("consent.pdf")
        logger.stage_result("heuristic", "3 shareholders", company="LEXSY INC.")
        logger.end_document(success=True, pages=2)

        [log_file] = tmp_path.glob("consent_*.log")
        assert logger.log_file == log_file
        content = log_file.read_text(encoding="utf-8")
        assert "Extracting: consent.pdf" in content
        assert "heuristic: 3 shareholders (company=LEXSY INC.)" in content
        assert "COMPLETE | pages=2 | " in content

    def test_each_document_gets_its_own_file(self, tmp_path):
        logger = get_logger(log_dir=tmp_path)
        logger.start_document("consent.pdf")
        logger.end_document(success=True, pages=2)
        logger.start_document("purchase.pdf")
        logger.end_document(success=True, pages=5)

        [first] = tmp_path.glob("consent_*.log")
        [second] = tmp_path.glob("purchase_*.log")
        assert logger.log_file == second
        assert "purchase.pdf" not in first.read_text(encoding="utf-8")
        second_content = second.read_text(encoding="utf-8")
        assert "Extracting: purchase.pdf" in second_content
        assert "consent.pdf" not in second_content
        assert len(logger.logger.handlers) == 2  # console + current file

    def test_failure_logged(self, tmp_path):
        logger = get_logger(log_dir=tmp_path)
        logger.start_document("consent.pdf")
        logger.error("Model backend failed", exc=RuntimeError("boom"))
        logger.end_document(success=False)

        content = next(tmp_path.glob("*.log")).read_text(encoding="utf-8")
        assert "[ERROR  ]" in content
        assert "Model backend failed | RuntimeError: boom" in content
        assert "FAILED" in content

    def test_module_loggers_reach_file(self, tmp_path):
        logger = get_logger(log_dir=tmp_path)
        logger.start_document("consent.pdf")
        logging.getLogger("shareholder_extractor.core.record_extractor").debug("Rejected candidate")

        content = logger.log_file.read_text(encoding="utf-8")
        assert "shareholder_extractor.core.record_extractor: Rejected candidate" in content


class TestDescribe:
    """Tests for metric rendering."""

    def test_long_values_shortened(self):
        assert _describe({"text": "x" * 60}) == f"text={'x' * 47}..."

    def test_long_lists_summarized(self):
        assert _describe({"rows": list(range(10))}) == "rows=[10 items]"

    def test_plain_values(self):
        assert _describe({"a": 1, "b": "two"}) == "a=1, b=two"
