"""Interactive text menus for exercising the linked stack and queue."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import Optional, TextIO

from .fifo import LinkedQueue, QueueEmptyError, QueuePositionError
from .stack import LinkedStack, StackEmptyError, StackPositionError


class _EndOfInput(Exception):
    """The input stream ran out before the session was finished."""


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _Console:
    """Reads whitespace separated integers and writes prompts and replies."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._tokens = _tokens(stdin)
        self._out = stdout

    def write(self, text: str) -> None:
        self._out.write(text)

    def say(self, line: str) -> None:
        self._out.write(line + "\n")

    def ask(self, prompt: str) -> Optional[int]:
        """Prompt and read one integer; ``None`` if the token is not one."""
        self._out.write(prompt)
        self._out.flush()
        token = next(self._tokens, None)
        if token is None:
            raise _EndOfInput
        try:
            return int(token)
        except ValueError:
            return None

    def ask_value(self, prompt: str) -> Optional[int]:
        value = self.ask(prompt)
        if value is None:
            self.say("Entrada invalida.")
        return value


_STACK_MENU = (
    "\nMenu:\n"
    "1. Empilhar elemento\n"
    "2. Desempilhar elemento\n"
    "3. Ver elemento no topo\n"
    "4. Verificar se a pilha esta vazia\n"
    "5. Exibir todos os elementos da pilha\n"
    "6. Inserir elemento no meio da pilha\n"
    "0. Sair\n"
)

_QUEUE_MENU = (
    "\nMenu:\n"
    "1. Adicionar elemento à fila\n"
    "2. Remover elemento da fila\n"
    "3. Ver elemento na frente da fila\n"
    "4. Verificar se a fila está vazia\n"
    "5. Exibir todos os elementos da fila\n"
    "6. Inserir elemento no meio da fila\n"
    "7. Remover elemento do meio da fila\n"
    "0. Sair\n"
)

_MAIN_MENU = (
    "\nMenu:\n"
    "1. Exemplo Pilha com Lista Dinamica\n"
    "2. Exemplo Fila com Lista Dinamica\n"
    "0. Sair\n"
)

_CHOOSE = "Escolha uma opcao: "


def _run_stack(console: _Console) -> None:
    stack = LinkedStack()
    while True:
        console.write(_STACK_MENU)
        option = console.ask(_CHOOSE)
        match option:
            case 1:
                value = console.ask_value("Digite o valor a ser empilhado: ")
                if value is not None:
                    stack.push(value)
                    console.say(f"Empilhado: {value}")
            case 2:
                try:
                    console.say(f"Elemento desempilhado: {stack.pop()}")
                except StackEmptyError:
                    console.say("Pilha vazia.")
            case 3:
                try:
                    console.say(f"Elemento no topo: {stack.peek()}")
                except StackEmptyError:
                    console.say("Pilha vazia.")
            case 4:
                if stack.is_empty():
                    console.say("A pilha esta vazia.")
                else:
                    console.say("A pilha nao esta vazia.")
            case 5:
                console.say(f"Elementos da pilha: {stack}")
            case 6:
                value = console.ask_value("Digite o valor a ser inserido: ")
                if value is None:
                    continue
                position = console.ask_value(
                    "Digite a posicao em que deseja inserir: "
                )
                if position is None:
                    continue
                try:
                    stack.insert_at(value, position)
                except StackPositionError:
                    console.say("Posicao invalida.")
                    continue
                if position == 0:
                    console.say(f"Empilhado: {value}")
                else:
                    console.say(f"Inserido: {value} na posicao {position}")
            case 0:
                stack.clear()
                console.say("Saindo...")
                return
            case _:
                console.say("Opcao invalida. Tente novamente.")


def _run_queue(console: _Console) -> None:
    queue = LinkedQueue()
    while True:
        console.write(_QUEUE_MENU)
        option = console.ask(_CHOOSE)
        match option:
            case 1:
                value = console.ask_value("Digite o valor a ser adicionado: ")
                if value is not None:
                    queue.enqueue(value)
                    console.say(f"Adicionado: {value}")
            case 2:
                try:
                    console.say(f"Elemento removido: {queue.dequeue()}")
                except QueueEmptyError:
                    console.say("Fila vazia.")
            case 3:
                try:
                    console.say(f"Elemento na frente da fila: {queue.front()}")
                except QueueEmptyError:
                    console.say("Fila vazia.")
            case 4:
                if queue.is_empty():
                    console.say("A fila esta vazia.")
                else:
                    console.say("A fila nao esta vazia.")
            case 5:
                console.say(f"Elementos da fila: {queue}")
            case 6:
                value = console.ask_value("Digite o valor a ser inserido: ")
                if value is None:
                    continue
                position = console.ask_value(
                    "Digite a posicao em que deseja inserir: "
                )
                if position is None:
                    continue
                try:
                    queue.insert_at(value, position)
                except QueuePositionError:
                    console.say("Posicao invalida.")
                else:
                    console.say(f"Inserido: {value} na posicao {position}")
            case 7:
                position = console.ask_value(
                    "Digite a posicao do elemento a ser removido: "
                )
                if position is None:
                    continue
                if queue.is_empty() or position < 0:
                    console.say("Fila vazia ou posição inválida.")
                    continue
                try:
                    value = queue.remove_at(position)
                except QueuePositionError:
                    console.say("Posição inválida.")
                else:
                    console.say(
                        f"Elemento removido da posicao {position}: {value}"
                    )
            case 0:
                queue.clear()
                console.say("Saindo...")
                return
            case _:
                console.say("Opcao invalida. Tente novamente.")


def _run_main(console: _Console) -> None:
    console.say("Iniciando o programa")
    while True:
        console.write(_MAIN_MENU)
        option = console.ask(_CHOOSE)
        match option:
            case 1:
                _run_stack(console)
            case 2:
                _run_queue(console)
            case 0:
                console.say("Saindo do programa. Obrigado!")
                return
            case _:
                console.say("Opcao invalida. Por favor, escolha uma opcao valida.")


def stack_session(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Run the stack menu until option 0 or the end of input."""
    console = _Console(stdin or sys.stdin, stdout or sys.stdout)
    try:
        _run_stack(console)
    except _EndOfInput:
        console.write("\n")


def queue_session(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Run the queue menu until option 0 or the end of input."""
    console = _Console(stdin or sys.stdin, stdout or sys.stdout)
    try:
        _run_queue(console)
    except _EndOfInput:
        console.write("\n")


def main_menu(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Run the top-level menu that offers the stack and queue sessions."""
    console = _Console(stdin or sys.stdin, stdout or sys.stdout)
    try:
        _run_main(console)
    except _EndOfInput:
        console.write("\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: run the interactive menu on standard streams."""
    parser = argparse.ArgumentParser(
        prog="linkedcollections",
        description="Interactive demo of a linked stack and a linked queue.",
    )
    parser.parse_args(argv)
    main_menu(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())