import pytest

from infonest.domain.role import ROLE_RANK, Role, rank


def test_rank_order():
    assert rank(None) == 0
    assert rank(Role.STUDENT) == 1
    assert rank(Role.FACULTY) == rank(Role.OFFICE) == 2
    assert rank(Role.ADMIN) == 3


def test_rank_is_consistent_preorder():
    ordered = [None, Role.STUDENT, Role.FACULTY, Role.ADMIN]
    ranks = [rank(r) for r in ordered]
    assert ranks == sorted(ranks)
    assert len(set(ranks)) == len(ranks)


def test_every_role_is_ranked():
    assert set(ROLE_RANK) == set(Role)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("faculty", Role.FACULTY),
        ("FACULTY", Role.FACULTY),
        (" Office ", Role.OFFICE),
        (Role.ADMIN, Role.ADMIN),
        ("dean", None),
        ("", None),
        (None, None),
        (3, None),
    ],
)
def test_parse(value, expected):
    assert Role.parse(value) is expected
