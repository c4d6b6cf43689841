import sys

from loguru import logger

from billsplit import BillSplitter, Diner
from billsplit.logging_config import configure_logging


def test_file_sink_receives_engine_debug_logs(tmp_path):
    log_file = tmp_path / "billsplit.log"
    configure_logging("WARNING", str(log_file))
    try:
        BillSplitter().add_diner(Diner("Ada", 15))
    finally:
        logger.remove()
        logger.add(sys.stderr)

    assert "Added diner 'Ada' with 15% tip" in log_file.read_text()
