"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from html import escape

import streamlit as st
import altair as alt

from xpnz.application.use_cases.calendar_navigator import CalendarNavigator
from xpnz.application.use_cases.visibility_controller import (
    VisibilityController,
)
from xpnz.domain.models.balance import BalancePeriod, SaveToSpendView
from xpnz.domain.models.currency import Currency
from xpnz.domain.models.spend import (
    SpendRecord,
    Transaction,
    TransactionCategory,
)
from xpnz.domain.models.time_frame import (
    TimeFrame,
    spending_label,
    time_frame_metadata,
)
from xpnz.domain.models.visibility import RowStyle, VisibilityState
from xpnz.domain.services.digit_roll import DigitRollSequencer
from xpnz.domain.services.formatting import (
    format_currency,
    format_transaction_amount,
)
from xpnz.adapters.interface.streamlit.odometer import (
    ODOMETER_CSS,
    build_badge_markup,
    build_odometer_markup,
)
from xpnz.infrastructure.container import (
    build_calendar_navigator,
    build_digit_roll_sequencer,
    build_filtered_transactions_use_case,
    build_save_to_spend_use_case,
    build_settings,
    build_visibility_controller,
    build_visibility_state,
)
from xpnz.infrastructure.logging.logger import get_usage_logger
from xpnz.infrastructure.settings import AppSettings

VISIBILITY_KEY = "xpnz_visibility_state"
CATEGORY_KEY = "xpnz_category"
CALENDAR_KEY = "xpnz_calendar"
CALENDAR_OPEN_KEY = "xpnz_calendar_open"
SEQUENCER_KEY = "xpnz_odometer"


@st.cache_data(show_spinner=False)
def _load_settings() -> AppSettings:
    """Cached wrapper around build_settings for Streamlit sessions."""
    return build_settings()


def _fetch_transactions(
    time_frame: TimeFrame,
    category: TransactionCategory,
) -> list[Transaction]:
    """Fetch the filtered transactions of a time frame."""
    use_case = build_filtered_transactions_use_case()
    return use_case.execute(time_frame, category)


@st.cache_data(show_spinner=False)
def _load_transactions(
    time_frame: TimeFrame,
    category: TransactionCategory,
) -> list[Transaction]:
    """Cached wrapper around _fetch_transactions."""
    return _fetch_transactions(time_frame, category)


def _fetch_save_to_spend(
    period: BalancePeriod,
    settings: AppSettings,
) -> SaveToSpendView:
    """Fetch the save-to-spend view for a period."""
    use_case = build_save_to_spend_use_case(settings)
    return use_case.execute(period)


def _get_visibility_state(settings: AppSettings) -> VisibilityState:
    """Return the session's visibility state, creating it on first run."""
    if VISIBILITY_KEY not in st.session_state:
        st.session_state[VISIBILITY_KEY] = build_visibility_state(settings)
    return st.session_state[VISIBILITY_KEY]


def _get_calendar() -> CalendarNavigator:
    if CALENDAR_KEY not in st.session_state:
        st.session_state[CALENDAR_KEY] = build_calendar_navigator(
            date.today()
        )
    return st.session_state[CALENDAR_KEY]


def _get_sequencer(settings: AppSettings) -> DigitRollSequencer:
    if SEQUENCER_KEY not in st.session_state:
        st.session_state[SEQUENCER_KEY] = build_digit_roll_sequencer(
            settings
        )
    return st.session_state[SEQUENCER_KEY]


def _toggle_calendar() -> None:
    st.session_state[CALENDAR_OPEN_KEY] = not st.session_state.get(
        CALENDAR_OPEN_KEY,
        False,
    )


def _row_markup(
    record: SpendRecord,
    style: RowStyle,
    currency: Currency,
) -> str:
    """Render a spend row as symbol, amount and suffix with emphasis.

    Args:
        record: Spend total to display.
        style: Derived opacities and font sizes for the row.
        currency: Currency supplying the symbol.

    Returns:
        HTML snippet for ``st.markdown``.
    """
    suffix = time_frame_metadata(record.time_frame).suffix
    return (
        f'<div style="opacity: {style.row_alpha}; font-weight: 800;">'
        f'<span style="font-size: {style.secondary_font_size:.0f}px; '
        f'opacity: {style.symbol_opacity:.2f};">'
        f"{escape(currency.symbol)}</span>"
        f'<span style="font-size: {style.font_size:.0f}px; '
        f'opacity: {style.amount_opacity:.2f};">'
        f"{record.formatted_amount}</span>"
        f'<span style="font-size: {style.secondary_font_size:.0f}px; '
        f'opacity: {style.suffix_opacity:.2f};">{suffix}</span>'
        "</div>"
    )


def _prepare_spend_chart_data(
    records: Sequence[SpendRecord],
    controller: VisibilityController,
    currency: Currency,
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows for the visible spend totals.

    Args:
        records: Visible records in display order.
        controller: Controller providing the emphasis values.
        currency: Currency used for the labels.

    Returns:
        One row per record with amount, label, order and opacity.
    """
    data: list[dict[str, str | float]] = []
    for record in records:
        time_frame = record.time_frame
        data.append(
            {
                "time_frame": time_frame.value,
                "amount": float(record.amount),
                "amount_label": format_currency(record.amount, currency),
                "order": time_frame_metadata(time_frame).display_order,
                "opacity": controller.emphasis_for(time_frame)
                * controller.row_alpha(time_frame),
            }
        )
    return data


def _render_spend_chart(data: list[dict[str, str | float]]) -> None:
    """Render a bar chart of the visible spend totals."""
    if not data:
        st.info("Enable a time frame to see your spending.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadius=6,
        color="#1c1c1e",
    ).encode(
        x=alt.X("time_frame:N", sort=alt.SortField("order"), title=None),
        y=alt.Y("amount:Q", title=None),
        opacity=alt.Opacity("opacity:Q", legend=None),
        tooltip=[
            alt.Tooltip("time_frame:N"),
            alt.Tooltip("amount_label:N"),
        ],
    ).configure_view(
        stroke=None
    )
    st.altair_chart(chart, width="stretch")


def _render_transactions(
    transactions: Sequence[Transaction],
    currency: Currency,
) -> None:
    """Render the transaction list of an expanded time frame."""
    if not transactions:
        st.caption("No transactions for this filter.")
        return
    data = [
        {
            "Name": item.name,
            "Type": item.transaction_type.value,
            "Amount": format_transaction_amount(item.amount, currency),
            "Incoming": item.is_incoming,
        }
        for item in transactions
    ]
    st.dataframe(data, width="stretch", hide_index=True, height=280)


def _render_expanded_card(
    controller: VisibilityController,
    record: SpendRecord,
    currency: Currency,
) -> None:
    """Render the detail card of the expanded time frame."""
    time_frame = record.time_frame
    style = controller.row_style(time_frame)
    st.markdown(
        _row_markup(record, style, currency),
        unsafe_allow_html=True,
    )
    category = st.radio(
        "Category",
        options=list(TransactionCategory),
        format_func=lambda item: item.value,
        horizontal=True,
        key=f"{CATEGORY_KEY}_{time_frame.value}",
        label_visibility="collapsed",
    )
    _render_transactions(
        _load_transactions(time_frame, category),
        currency,
    )
    st.button(
        "Close",
        key=f"close_{time_frame.value}",
        on_click=controller.toggle_expanded,
        args=(time_frame,),
    )


def _render_spend_rows(
    controller: VisibilityController,
    currency: Currency,
) -> None:
    """Render every visible spend row, expanded or summarised."""
    for record in controller.visible_records():
        time_frame = record.time_frame
        if controller.is_expanded(time_frame):
            _render_expanded_card(controller, record, currency)
            continue
        st.markdown(
            _row_markup(record, controller.row_style(time_frame), currency),
            unsafe_allow_html=True,
        )
        st.button(
            f"Details ({time_frame.value})",
            key=f"expand_{time_frame.value}",
            on_click=controller.toggle_expanded,
            args=(time_frame,),
        )


def _render_time_frame_toggles(controller: VisibilityController) -> None:
    """Render the "Time Frames" switches."""
    with st.expander("+ Add Time Frame"):
        for time_frame, enabled in controller.time_frame_toggles():
            st.toggle(
                spending_label(time_frame),
                value=enabled,
                key=f"enabled_{time_frame.value}",
                on_change=controller.toggle_enabled,
                args=(time_frame,),
            )


def _render_calendar(navigator: CalendarNavigator) -> None:
    """Render the calendar panel for the selected day."""
    st.subheader(navigator.month_year_label)
    st.markdown(f"## {navigator.day_number}{navigator.ordinal_suffix}")
    metrics = navigator.day_metrics()
    st.markdown(
        f"Todays spending: **{metrics.todays_spending}**  \n"
        f"Top saving: **{metrics.top_saving}**  \n"
        f"Largest Expense: **{metrics.largest_expense}**"
    )
    back_col, forward_col = st.columns(2)
    back_col.button(
        f"‹ {navigator.previous_label}",
        key="calendar_back",
        on_click=navigator.go_previous,
    )
    forward_col.button(
        f"{navigator.next_label} ›",
        key="calendar_forward",
        on_click=navigator.go_next,
        disabled=not navigator.can_go_forward,
    )


def _render_home(settings: AppSettings) -> None:
    """Render the home page with spend rows and time frame controls."""
    state = _get_visibility_state(settings)
    controller = build_visibility_controller(state, settings)

    st.button("Calendar", key="calendar_toggle", on_click=_toggle_calendar)
    if st.session_state.get(CALENDAR_OPEN_KEY, False):
        _render_calendar(_get_calendar())

    if not state.enabled_time_frames:
        st.warning("All time frames are hidden.")
    _render_spend_rows(controller, settings.currency)
    _render_time_frame_toggles(controller)
    _render_spend_chart(
        _prepare_spend_chart_data(
            controller.visible_records(),
            controller,
            settings.currency,
        )
    )


def _render_save_to_spend(settings: AppSettings) -> None:
    """Render the save-to-spend page with the odometer balance."""
    period = st.radio(
        "Period",
        options=list(BalancePeriod),
        format_func=lambda item: item.value,
        horizontal=True,
        key="xpnz_period",
    )
    view = _fetch_save_to_spend(period, settings)
    sequencer = _get_sequencer(settings)
    cells = sequencer.update(view.snapshot.amount)
    start_values = [sequencer.start_value(i) for i in range(len(cells))]
    blurred = [sequencer.is_blurred(i) for i in range(len(cells))]

    st.markdown(ODOMETER_CSS, unsafe_allow_html=True)
    st.markdown(
        build_odometer_markup(cells, start_values, blurred),
        unsafe_allow_html=True,
    )
    st.markdown(build_badge_markup(view.snapshot), unsafe_allow_html=True)

    st.subheader("What shaped your balance")
    st.dataframe(
        [{"Label": stat.label, "Value": stat.value} for stat in view.stats],
        width="stretch",
        hide_index=True,
    )
    st.subheader("Insights")
    st.write(view.insight)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="XPNZ", layout="centered")
    st.title("XPNZ")

    settings = _load_settings()
    page = st.sidebar.selectbox("Page", ["Home", "Save-to-Spend"])
    get_usage_logger().info(f"Rendering page {page}")

    if page == "Home":
        _render_home(settings)
    else:
        _render_save_to_spend(settings)


if __name__ == "__main__":  # pragma: no cover
    main()
