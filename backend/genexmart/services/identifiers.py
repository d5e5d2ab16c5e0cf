"""
GenexMart Backend: Record Code Generation
============================================

What:  Random fixed-length codes used as primary keys for categories (2
       characters) and customers (8 characters).
How:   Each position is drawn independently and uniformly from A-Z0-9.

No uniqueness check is made against existing rows. With 36**2 = 1296
possible category codes, collisions are realistic; they surface as a
primary-key violation from the store.
"""

import random
import string

ID_ALPHABET = string.ascii_uppercase + string.digits

CATEGORY_ID_LENGTH = 2
CUSTOMER_ID_LENGTH = 8


def generate_id(length: int) -> str:
    """Return a `length`-character code over ID_ALPHABET."""
    return "".join(random.choice(ID_ALPHABET) for _ in range(length))
