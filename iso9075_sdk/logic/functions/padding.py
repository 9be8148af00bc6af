def add_leading_zeros(number: int, target_length: int) -> str:
    """
    Left-pad the digits of `number` with zeros up to `target_length`. The sign of a negative number stays in front of the padding, and numbers already at or over the target length are not truncated.

    Example:
        add_leading_zeros(7, 2) == "07"
        add_leading_zeros(-5, 4) == "-0005"
        add_leading_zeros(12345, 4) == "12345"
    """
    sign = "-" if number < 0 else ""
    return f"{sign}{str(abs(number)).zfill(target_length)}"
