import logging
import os
import tempfile
import unittest
from pathlib import Path

from themevote.application.metrics import configure_metrics_logger


class MetricsLoggerTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.logger_name = f"metrics.test.{id(self)}"

    def tearDown(self):
        logger = logging.getLogger(self.logger_name)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
        self.tmpdir.cleanup()

    def test_same_path_keeps_handler(self):
        path = str(Path(self.tmpdir.name) / "logs" / "metrics.jsonl")

        logger = configure_metrics_logger(path, logger_name=self.logger_name)
        handler = logger.handlers[0]
        configure_metrics_logger(path, logger_name=self.logger_name)

        self.assertEqual(logger.handlers, [handler])

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_symlinked_directory_keeps_handler(self):
        real_dir = Path(self.tmpdir.name) / "real"
        real_dir.mkdir()
        link_dir = Path(self.tmpdir.name) / "link"
        try:
            os.symlink(real_dir, link_dir, target_is_directory=True)
        except OSError:
            self.skipTest("cannot create symlink")
        path = str(link_dir / "metrics.jsonl")

        logger = configure_metrics_logger(path, logger_name=self.logger_name)
        handler = logger.handlers[0]
        configure_metrics_logger(path, logger_name=self.logger_name)

        self.assertIs(logger.handlers[0], handler)
        self.assertEqual(len(logger.handlers), 1)


if __name__ == "__main__":
    unittest.main()
