from pytest import fixture

from srpn.machine import Machine


@fixture
def machine() -> Machine:
    '''
    Fresh machine, printing to stdout so capsys sees everything.
    '''
    return Machine()


@fixture
def run(machine, capsys):
    '''
    Feed lines to the machine, return what it printed, one list item per line.
    '''
    def run_(*lines: str) -> list:
        for line in lines:
            machine.process_line(line)
        return capsys.readouterr().out.splitlines()
    return run_