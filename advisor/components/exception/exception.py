import sys

from advisor.components.src_logging.logger import logging


class CareerCoachException(Exception):
    """
    Carries the file name and line number of the frame that failed, so the
    log line points at the real source of the error and not at the handler.
    """

    def __init__(self, error_message, error_details: sys):
        super().__init__(str(error_message))
        self.error_message = error_message
        _, _, exc_tb = error_details.exc_info()

        if exc_tb is not None:
            while exc_tb.tb_next is not None:
                exc_tb = exc_tb.tb_next
            self.lineno = exc_tb.tb_lineno
            self.file_name = exc_tb.tb_frame.f_code.co_filename
        else:
            self.lineno = None
            self.file_name = None

    def __str__(self):
        if self.file_name is None:
            return str(self.error_message)
        return "Error occured in python script name [{0}] line number [{1}] error message [{2}]".format(
            self.file_name, self.lineno, str(self.error_message)
        )


class AdvisoryServiceError(CareerCoachException):
    """The AI collaborator failed or returned output we could not use."""


class PersistenceError(CareerCoachException):
    """A database operation failed and was rolled back."""


if __name__ == "__main__":
    try:
        logging.info("Enter the try block")
        a = 1 / 0
    except Exception as e:
        raise CareerCoachException(e, sys)
