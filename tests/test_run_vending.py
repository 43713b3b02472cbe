"""Tests for the entry point's handling of closed input."""
from run_vending import serve
from vending_demo.console import Console
from vending_demo.models import SessionState
from vending_demo.session import VendingSession


def test_input_closed_mid_purchase_returns_change(scripted):
    """Test that EOF at the item prompt still hands back the balance."""
    console = scripted(["2", "0", "101", "y"])
    session = VendingSession()

    change = serve(session, console)

    assert change == 50
    assert session.balance == 0
    assert session.state is SessionState.COMPLETE
    assert session.catalog.find_by_code(101).stock == 4
    assert "Your change: £0.50" in console.lines
    assert console.lines[-1] == "Thank you for using the vending machine!"
    assert any("SESSION END" in l for l in session.catalog.logs)


def test_input_closed_while_inserting_money(scripted):
    console = scripted(["1.20"])
    session = VendingSession()

    assert serve(session, console) == 120
    assert "Your change: £1.20" in console.lines


def test_ctrl_c_returns_change():
    lines = []

    def interrupt(prompt):
        raise KeyboardInterrupt

    session = VendingSession()
    session.insert_money(70)

    change = serve(session, Console(input_fn=interrupt, output_fn=lines.append))

    assert change == 70
    assert session.balance == 0
    assert "Your change: £0.70" in lines
