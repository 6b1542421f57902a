import io

import pytest

from linkedcollections.cli import main, main_menu, queue_session, stack_session
from linkedcollections.fifo import LinkedQueue
from linkedcollections.stack import LinkedStack


def streams(text):
    return io.StringIO(text), io.StringIO()


def test_stack_push_and_display():
    stdin, out = streams("1 5\n1 7\n5\n0\n")
    stack_session(stdin, out)
    output = out.getvalue()
    assert "Empilhado: 5" in output
    assert "Empilhado: 7" in output
    assert f"Elementos da pilha: {LinkedStack([5, 7])}" in output
    assert output.rstrip().endswith("Saindo...")


def test_stack_pop_and_peek():
    stdin, out = streams("1 4\n3\n2\n")
    stack_session(stdin, out)
    output = out.getvalue()
    assert "Elemento no topo: 4" in output
    assert "Elemento desempilhado: 4" in output


def test_stack_empty_operations_report_empty():
    stdin, out = streams("2\n3\n0\n")
    stack_session(stdin, out)
    assert out.getvalue().count("Pilha vazia.") == 2


def test_stack_emptiness_check():
    stdin, out = streams("4\n1 1\n4\n0\n")
    stack_session(stdin, out)
    output = out.getvalue()
    first = output.index("A pilha esta vazia.")
    second = output.index("A pilha nao esta vazia.")
    assert first < second


def test_stack_insert_positions():
    stdin, out = streams("6 9 0\n6 8 1\n6 3 7\n6 2 -1\n5\n0\n")
    stack_session(stdin, out)
    output = out.getvalue()
    assert "Empilhado: 9" in output
    assert "Inserido: 8 na posicao 1" in output
    assert output.count("Posicao invalida.") == 2
    expected = LinkedStack([9])
    expected.insert_at(8, 1)
    assert f"Elementos da pilha: {expected}" in output


def test_stack_invalid_option():
    stdin, out = streams("9\n0\n")
    stack_session(stdin, out)
    assert "Opcao invalida. Tente novamente." in out.getvalue()


@pytest.mark.parametrize("session", [stack_session, queue_session])
def test_session_ends_at_end_of_input(session):
    stdin, out = streams("1 3\n")
    session(stdin, out)
    output = out.getvalue()
    assert "Saindo..." not in output
    assert output.endswith("\n")


@pytest.mark.parametrize("session", [stack_session, queue_session])
def test_non_numeric_option_is_invalid(session):
    stdin, out = streams("abc\n0\n")
    session(stdin, out)
    output = out.getvalue()
    assert "Opcao invalida. Tente novamente." in output
    assert "Saindo..." in output


def test_queue_enqueue_dequeue_order():
    stdin, out = streams("1 1\n1 2\n3\n2\n5\n0\n")
    queue_session(stdin, out)
    output = out.getvalue()
    assert "Adicionado: 1" in output
    assert "Adicionado: 2" in output
    assert "Elemento na frente da fila: 1" in output
    assert "Elemento removido: 1" in output
    assert f"Elementos da fila: {LinkedQueue([2])}" in output


def test_queue_empty_operations_report_empty():
    stdin, out = streams("2\n3\n4\n0\n")
    queue_session(stdin, out)
    output = out.getvalue()
    assert output.count("Fila vazia.") == 2
    assert "A fila esta vazia." in output


def test_queue_insert_positions():
    stdin, out = streams("6 5 0\n6 6 1\n6 7 9\n5\n0\n")
    queue_session(stdin, out)
    output = out.getvalue()
    assert "Inserido: 5 na posicao 0" in output
    assert "Inserido: 6 na posicao 1" in output
    assert "Posicao invalida." in output
    assert f"Elementos da fila: {LinkedQueue([5, 6])}" in output


def test_queue_remove_at():
    stdin, out = streams("1 10\n1 20\n1 30\n7 1\n7 5\n5\n0\n")
    queue_session(stdin, out)
    output = out.getvalue()
    assert "Elemento removido da posicao 1: 20" in output
    assert "Posição inválida." in output
    assert f"Elementos da fila: {LinkedQueue([10, 30])}" in output


def test_queue_remove_at_on_empty_or_negative():
    stdin, out = streams("7 0\n1 4\n7 -2\n0\n")
    queue_session(stdin, out)
    assert out.getvalue().count("Fila vazia ou posição inválida.") == 2


def test_main_menu_runs_both_sessions():
    stdin, out = streams("1\n1 3\n0\n2\n1 4\n0\n0\n")
    main_menu(stdin, out)
    output = out.getvalue()
    assert output.startswith("Iniciando o programa")
    assert "Empilhado: 3" in output
    assert "Adicionado: 4" in output
    assert output.count("Saindo...") == 2
    assert "Saindo do programa. Obrigado!" in output


def test_main_menu_invalid_option():
    stdin, out = streams("5\n0\n")
    main_menu(stdin, out)
    assert "Opcao invalida. Por favor, escolha uma opcao valida." in out.getvalue()


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert "Saindo do programa. Obrigado!" in capsys.readouterr().out