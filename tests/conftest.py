import pytest

from raise_planner.constraints import DEFAULT_CONSTRAINT_TABLE
from raise_planner.roster import Employee


# Define pytest markers for test categories
def pytest_configure(config):
    """
    Register custom markers to avoid pytest warnings.
    """
    config.addinivalue_line("markers", "unit: mark a test as a unit test")
    config.addinivalue_line("markers", "integration: mark a test as an integration test")
    config.addinivalue_line("markers", "config: mark a test as a config test")
    config.addinivalue_line("markers", "engines: mark a test as an engines test")
    config.addinivalue_line("markers", "planning: mark a test as a planning test")


@pytest.fixture
def table():
    return DEFAULT_CONSTRAINT_TABLE


@pytest.fixture
def us_employee():
    return Employee(
        employee_id="E001",
        name="Avery Stone",
        current_salary=100000.0,
        country="US",
        currency="USD",
        performance_rating=3,
    )


@pytest.fixture
def india_employee():
    return Employee(
        employee_id="E002",
        name="Ravi Kumar",
        current_salary=1000000.0,
        country="India",
        currency="INR",
        performance_rating=1,
    )


@pytest.fixture
def mixed_roster():
    return [
        Employee("E001", 100000.0, "US", "USD", 3, name="Avery Stone"),
        Employee("E002", 90000.0, "US", "USD", 5, ("flight_risk",), name="Blake Ortiz"),
        Employee("E003", 60000.0, "UK", "GBP", 4, ("promotion_ready",), name="Casey Lin"),
        Employee("E004", 70000.0, "Germany", "EUR", 2, ("recent_raise",), name="Dana Weber"),
        Employee("E005", 80000.0, "Canada", "CAD", None, ("new_hire",), name="Ellis Park"),
    ]
