"""Pytest configuration and fixtures."""

import pytest
from datetime import date

from xirrcalc.models.transaction import Transaction


@pytest.fixture
def one_year():
    """Factory for a deposit of 1000 on 2010-01-01 and a withdrawal a year later."""
    def make(final_value):
        return [
            Transaction(-1000, date(2010, 1, 1)),
            Transaction(final_value, date(2011, 1, 1)),
        ]
    return make


@pytest.fixture
def quarterly_deposits():
    """Four quarterly deposits and one withdrawal, as in a spreadsheet XIRR example."""
    return [
        Transaction(-1000, "2010-01-01"),
        Transaction(-1000, "2010-04-01"),
        Transaction(-1000, "2010-07-01"),
        Transaction(-1000, "2010-10-01"),
        Transaction(4300, "2011-01-01"),
    ]


@pytest.fixture
def readme_transactions():
    """Irregular deposits followed by a single withdrawal."""
    return [
        Transaction(-1000, "2016-01-15"),
        Transaction(-2500, "2016-02-08"),
        Transaction(-1000, "2016-04-17"),
        Transaction(5050, "2016-08-24"),
    ]


@pytest.fixture
def long_history_transactions():
    """One deposit followed by seventeen years of distributions."""
    return [
        Transaction(-10000, "2000-05-24"),
        Transaction(3027.25, "2000-06-05"),
        Transaction(630.68, "2001-04-09"),
        Transaction(2018.2, "2004-02-24"),
        Transaction(1513.62, "2005-03-18"),
        Transaction(1765.89, "2006-02-15"),
        Transaction(4036.33, "2007-01-10"),
        Transaction(4036.33, "2007-11-14"),
        Transaction(1513.62, "2008-12-17"),
        Transaction(1513.62, "2010-01-15"),
        Transaction(2018.16, "2011-01-14"),
        Transaction(1513.62, "2012-02-03"),
        Transaction(1009.08, "2013-01-18"),
        Transaction(1513.62, "2014-01-24"),
        Transaction(1513.62, "2015-01-30"),
        Transaction(1765.89, "2016-01-22"),
        Transaction(1765.89, "2017-01-20"),
        Transaction(22421.55, "2017-06-05"),
    ]


@pytest.fixture
def short_heavy_loss_transactions():
    """Many deposits within a month and a withdrawal worth less than their sum."""
    return [
        Transaction(-2610, "2001-06-22"),
        Transaction(-2589, "2001-07-03"),
        Transaction(-5110, "2001-07-05"),
        Transaction(-2550, "2001-07-06"),
        Transaction(-5086, "2001-07-09"),
        Transaction(-2561, "2001-07-10"),
        Transaction(-5040, "2001-07-12"),
        Transaction(-2552, "2001-07-13"),
        Transaction(-2530, "2001-07-16"),
        Transaction(29520, "2001-07-17"),
    ]
