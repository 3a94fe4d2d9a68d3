import logging
import shlex
import subprocess as sp
from typing import Union

from analyse_branch.domain.exceptions import CommandExecutionError


def exec_cmd(cmd: str, exit_on_error: bool = True, cwd: Union[str, None] = None) -> str:
    return exec_cmd_binary(
        cmd=cmd, raise_on_error=exit_on_error, cwd=cwd).decode(
        "utf-8", errors="replace")


def exec_cmd_binary(cmd: str, raise_on_error: bool = True,
                    cwd: Union[str, None] = None) -> bytes:
    logging.debug("Executing command: %s", cmd)
    with sp.Popen(shlex.split(cmd), stdout=sp.PIPE, stderr=sp.PIPE, cwd=cwd) as p:
        stdout, stderr = p.communicate()

    if raise_on_error and p.returncode:
        raise CommandExecutionError(
            f'Command failed -> {cmd}\nStderr -> {stderr.decode(errors="replace")}',
            returncode=p.returncode,
            stderr=stderr.decode(errors="replace"))

    return stdout


def split_lines(output: str) -> list[str]:
    # rev-list on an empty range prints nothing at all
    return [line for line in output.rstrip('\n').split('\n') if line != '']
