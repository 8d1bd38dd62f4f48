import logging

from beam_engine.services.logging_setup import setup_logging


def test_setup_logging_is_idempotent(tmp_path):
    logger = logging.getLogger("beam_engine")
    old_handlers = list(logger.handlers)
    for h in old_handlers:
        logger.removeHandler(h)
    try:
        lg = setup_logging(log_dir=str(tmp_path / "logs"))
        assert lg is logger
        assert len(lg.handlers) == 2
        setup_logging(log_dir=str(tmp_path / "logs"))
        assert len(lg.handlers) == 2

        logging.getLogger("beam_engine.engine.analysis").info("hola")
        for h in lg.handlers:
            h.flush()
        content = (tmp_path / "logs" / "app.log").read_text(encoding="utf-8")
        assert "Logging inicializado" in content
        assert "| INFO | beam_engine.engine.analysis | hola" in content
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
        for h in old_handlers:
            logger.addHandler(h)
        logger.setLevel(logging.NOTSET)


def test_logging_setup_has_no_path_header():
    from beam_engine.services import logging_setup
    src = open(logging_setup.__file__, encoding="utf-8").read()
    assert not src.startswith("# path:")
