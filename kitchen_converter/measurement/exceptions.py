from dataclasses import dataclass


@dataclass
class UnknownUnitError(Exception):
    text: str
    message: str = "[unknown unit]"

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self):
        return f"{self.message} text={self.text}"


@dataclass
class UnitCategoryError(Exception):
    from_unit: str
    to_unit: str
    message: str = "[unit category mismatch]"

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self):
        return f"{self.message} from={self.from_unit} to={self.to_unit}"


@dataclass
class InvalidDensityError(Exception):
    density: float
    message: str = "[invalid density]"

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self):
        return f"{self.message} density={self.density}"


@dataclass
class InvalidRatioError(Exception):
    from_unit: str
    to_unit: str
    ratio: float
    message: str = "[invalid ratio]"

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self):
        return (
            f"{self.message} from={self.from_unit} to={self.to_unit} "
            f"ratio={self.ratio}"
        )


@dataclass
class FractionConfigError(Exception):
    custom_message: str
    message: str = "[fraction config error]"

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self):
        return f"{self.message} {self.custom_message}"


@dataclass
class RatioConfigError(Exception):
    custom_message: str
    message: str = "[ratio config error]"

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self):
        return f"{self.message} {self.custom_message}"


@dataclass
class InvalidTemperatureError(Exception):
    value: float
    message: str = "[invalid temperature]"

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self):
        return f"{self.message} value={self.value}"
