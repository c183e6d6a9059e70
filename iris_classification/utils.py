import psutil
from colorama import Style, Fore


def print_ram_used() -> None:
    ram_used_bytes = psutil.Process().memory_info().rss
    ram_used_MB = ram_used_bytes/(1024 * 1024)
    print( "------->> "+Fore.RED + Style.BRIGHT+ f"RAM used by process : {ram_used_MB:.2f} MB" + Style.RESET_ALL )


def print_info(message) -> None:
    print( Fore.GREEN + Style.BRIGHT + message + Style.RESET_ALL )


def print_error(message) -> None:
    print( Fore.RED + Style.BRIGHT + message + Style.RESET_ALL )


def append_log(path, line) -> None:
    """Append one line to the training log file (nothing is written if path is None)."""
    if path is None:
        return
    with open(path, "a") as f:
        f.write(line + "\n")
