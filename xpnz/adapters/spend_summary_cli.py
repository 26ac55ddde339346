"""CLI adapter printing the home screen rows and an odometer schedule.

Environment variables:
    XPNZ_EXPANDED: Optional time frame to expand before printing.
    XPNZ_BALANCE_PERIOD: Save-to-spend period (default ``Today``).
"""

import os

from xpnz.domain.models.balance import BalancePeriod
from xpnz.domain.models.time_frame import parse_time_frame, time_frame_metadata
from xpnz.domain.services.formatting import format_currency
from xpnz.infrastructure.container import (
    build_save_to_spend_use_case,
    build_settings,
    build_visibility_controller,
    build_visibility_state,
)
from xpnz.infrastructure.logging.logger import get_app_logger


def _parse_period(value: str | None, logger) -> BalancePeriod:
    """Parse a balance period name.

    Args:
        value: Period name such as ``"Monthly"``.
        logger: Logger used for warnings.

    Returns:
        BalancePeriod: Parsed period, ``TODAY`` when missing or invalid.
    """
    if not value:
        return BalancePeriod.TODAY
    for period in BalancePeriod:
        if period.value.lower() == value.strip().lower():
            return period
    logger.warning(f"Unknown balance period '{value}', using Today")
    return BalancePeriod.TODAY


def main() -> None:
    """Print visible spend rows and the digit roll schedule."""
    logger = get_app_logger()
    settings = build_settings()
    controller = build_visibility_controller(
        build_visibility_state(settings),
        settings,
    )

    raw_expanded = os.getenv("XPNZ_EXPANDED")
    if raw_expanded:
        expanded = parse_time_frame(raw_expanded)
        if expanded is None:
            logger.warning(f"Unknown time frame '{raw_expanded}'")
        else:
            controller.toggle_expanded(expanded)

    print("Spending")
    for record in controller.visible_records():
        time_frame = record.time_frame
        style = controller.row_style(time_frame)
        print(
            f"{format_currency(record.amount, settings.currency)}"
            f"{time_frame_metadata(time_frame).suffix} "
            f"(opacity={style.amount_opacity:.2f}, "
            f"alpha={style.row_alpha:.2f})"
        )

    period = _parse_period(os.getenv("XPNZ_BALANCE_PERIOD"), logger)
    view = build_save_to_spend_use_case(settings).execute(period)
    print(
        f"Save-to-spend {period.value}: {view.snapshot.amount} "
        f"{view.snapshot.percentage}"
    )
    for cell in view.digit_cells:
        if cell.is_numeric:
            print(f"  {cell.character} rolls after {cell.animation_delay:.2f}s")
        else:
            print(f"  {cell.character} static")


if __name__ == "__main__":  # pragma: no cover
    main()
