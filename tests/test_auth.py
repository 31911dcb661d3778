from adhd_os.auth import LOADING, SIGNED_IN, SIGNED_OUT, AuthSession, SessionSnapshot, User, gate_view


def test_gate_view_loading_takes_precedence():
    assert gate_view(SessionSnapshot(user=None, is_loading=True)) == LOADING
    assert gate_view(SessionSnapshot(user=User("u1", "Sam"), is_loading=True)) == LOADING
    assert gate_view(SessionSnapshot(user=None, is_loading=False)) == SIGNED_OUT
    assert gate_view(SessionSnapshot(user=User("u1", "Sam"))) == SIGNED_IN


def test_session_starts_loading():
    assert gate_view(AuthSession().snapshot) == LOADING


def test_subscribe_delivers_snapshots_until_unsubscribed():
    session = AuthSession()
    seen = []
    unsubscribe = session.subscribe(seen.append)

    session.resolve(None)
    session.login(User("u1", "Sam"))
    unsubscribe()
    session.logout()

    assert [gate_view(snapshot) for snapshot in seen] == [LOADING, SIGNED_OUT, SIGNED_IN]
    assert gate_view(session.snapshot) == SIGNED_OUT


def test_unsubscribe_twice_is_harmless():
    session = AuthSession()
    unsubscribe = session.subscribe(lambda snapshot: None)
    unsubscribe()
    unsubscribe()
    session.logout()
