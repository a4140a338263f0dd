from util import log


class SafePrinterMixin:
    __verbose: bool

    def __init__(self, verbose: bool = False):
        self.__verbose = verbose

    def sprint(self, content: str, e: Exception | None = None):
        """
        Safely ('s') prints the contents if the verbose flag is set to True.

        Parameters:
        content (str): The content to be printed.
        e (Exception | None): The exception to be printed, if available.
        """
        if not self.__verbose:
            return
        if e:
            log.w(content, e)
        else:
            log.d(content)
