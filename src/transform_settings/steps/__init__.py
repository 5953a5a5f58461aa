"""Steps concretos que operam sobre settings de transform."""
