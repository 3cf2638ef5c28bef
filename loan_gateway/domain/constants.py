"""Business constants for loan decisions and age eligibility"""

from typing import Dict, Optional, Tuple
from loan_gateway.domain.models import Country, Gender

# Loans are never offered below this age, in any country
UNDERAGE_PERIOD = 18

# Offered loan range (amount in EUR, period in months)
MINIMUM_LOAN_AMOUNT = 2000
MAXIMUM_LOAN_AMOUNT = 10000
MINIMUM_LOAN_PERIOD = 12
MAXIMUM_LOAN_PERIOD = 60

# Average lifetime in years by country and gender.
# Latvian codes do not encode gender, so Latvia has a single entry.
LIFETIME_YEARS: Dict[Tuple[Country, Optional[Gender]], int] = {
    (Country.EE, Gender.FEMALE): 82,
    (Country.EE, Gender.MALE): 78,
    (Country.LV, None): 70,
    (Country.LT, Gender.FEMALE): 79,
    (Country.LT, Gender.MALE): 69,
}

# Credit segments keyed by the upper bound (exclusive) of the last four
# identity code digits: (upper_bound, segment, credit_modifier)
CREDIT_SEGMENTS: Tuple[Tuple[int, int, int], ...] = (
    (2500, 0, 0),  # debt
    (5000, 1, 100),
    (7500, 2, 300),
    (10000, 3, 1000),
)
