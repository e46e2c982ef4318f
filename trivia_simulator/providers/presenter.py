import logging

logger = logging.getLogger("trivia_simulator")


class LoggingPresenter:
    """Narrates the game through the `trivia_simulator` logger."""

    def present(self, category: str, question: str) -> None:
        logger.info("The category is %s", category)
        logger.info(question)

    def narrate(self, message: str) -> None:
        logger.info(message)
