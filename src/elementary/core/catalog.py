"""Notable elementary rules and rule catalog management."""

from typing import Dict, List, Optional, Union

from .rule import Rule, decode, parse_rule_number


class NamedRule:
    """A rule number with a name and description."""

    def __init__(self, name: str, number: int, description: str = "", category: str = "Custom") -> None:
        """Initialize a named rule.

        Args:
            name: Rule name, matched case-insensitively
            number: Rule number 0-255
            description: Optional description
            category: Behavior class used for grouping

        Raises:
            OutOfRange: If number is outside 0-255
        """
        self.name = name
        self.number = number
        self.description = description
        self.category = category
        self._rule = decode(number)

    @property
    def rule(self) -> Rule:
        """The decoded rule."""
        return self._rule

    def __repr__(self) -> str:
        return f"NamedRule({self.name!r}, {self.number})"


class RuleCatalog:
    """Manages a collection of named rules."""

    CATEGORIES = ["Uniform", "Periodic", "Chaotic", "Complex", "Custom"]

    def __init__(self) -> None:
        """Initialize the catalog with built-in rules."""
        self._rules: Dict[str, NamedRule] = {}
        self._load_builtin_rules()

    def _load_builtin_rules(self) -> None:
        """Load built-in notable rules."""
        # Class 1: evolve to a uniform row
        self.add_rule(NamedRule("null", 0, "Every cell dies", "Uniform"))
        self.add_rule(NamedRule("fill", 255, "Every cell becomes alive", "Uniform"))

        # Class 2: stable or periodic structures
        self.add_rule(NamedRule("identity", 204, "Every cell keeps its state", "Periodic"))
        self.add_rule(NamedRule("shift", 170, "Row shifts one cell left each generation", "Periodic"))
        self.add_rule(NamedRule("traffic", 184, "Cars move right when the cell ahead is empty", "Periodic"))
        self.add_rule(NamedRule("triangle", 222, "Solid triangle growing from a single cell", "Periodic"))
        self.add_rule(NamedRule("checkerboard", 250, "Checkerboard triangle", "Periodic"))

        # Class 3: chaotic
        self.add_rule(NamedRule("rule30", 30, "Chaotic, used as a random number generator", "Chaotic"))
        self.add_rule(NamedRule("rule45", 45, "Chaotic with a drifting boundary", "Chaotic"))
        self.add_rule(NamedRule("sierpinski", 90, "XOR of the two neighbors; Sierpinski triangle", "Chaotic"))
        self.add_rule(NamedRule("rule150", 150, "XOR of the whole neighborhood", "Chaotic"))

        # Class 4: complex localized structures
        self.add_rule(NamedRule("rule54", 54, "Complex, with interacting particles", "Complex"))
        self.add_rule(NamedRule("rule110", 110, "Complex and Turing complete", "Complex"))

    def add_rule(self, named_rule: NamedRule) -> None:
        """Add a rule to the catalog.

        Args:
            named_rule: Rule to add; replaces any rule with the same name
        """
        self._rules[named_rule.name.lower()] = named_rule

    def get_rule(self, key: Union[str, int]) -> Optional[NamedRule]:
        """Get a rule by name or number.

        Args:
            key: Rule name (case-insensitive) or rule number

        Returns:
            NamedRule instance or None if not found
        """
        if isinstance(key, int):
            for named_rule in self._rules.values():
                if named_rule.number == key:
                    return named_rule
            return None

        return self._rules.get(key.lower())

    def resolve(self, value: str) -> Rule:
        """Turn a command-line rule argument into a decoded rule.

        Args:
            value: Decimal rule number or catalog name

        Returns:
            Decoded rule

        Raises:
            OutOfRange: If value is a number outside 0-255
            KeyError: If value is neither a number nor a known name
        """
        number = parse_rule_number(value)
        if number is not None:
            return decode(number)

        named_rule = self.get_rule(value.strip())
        if named_rule is None:
            raise KeyError(f"Unknown rule '{value}'")
        return named_rule.rule

    def list_rules(self) -> List[str]:
        """Get list of all rule names.

        Returns:
            List of rule names
        """
        return [named_rule.name for named_rule in self._rules.values()]

    def get_rules_by_category(self) -> Dict[str, List[str]]:
        """Get rules organized by category.

        Returns:
            Dictionary mapping categories to rule name lists, empty categories omitted
        """
        categories: Dict[str, List[str]] = {category: [] for category in self.CATEGORIES}

        for named_rule in self._rules.values():
            categories.setdefault(named_rule.category, []).append(named_rule.name)

        return {category: names for category, names in categories.items() if names}
