"""Streamlit UI for ADHD Personal OS."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, time
from typing import Any

from adhd_os import anxiety, dashboard, estimates, planner, reflection, seed
from adhd_os.auth import LOADING, SIGNED_OUT, AuthSession, SessionSnapshot, User, gate_view
from adhd_os.config import Settings, build_store, configure_logging, load_settings
from adhd_os.schema import BLOCK_TYPES, LEVELS, MOODS

logger = logging.getLogger("adhd_os.ui")

# Streamlit markdown only knows a fixed palette
_ST_COLORS = {
    "red": "red",
    "yellow": "orange",
    "green": "green",
    "blue": "blue",
    "purple": "violet",
    "indigo": "blue",
    "orange": "orange",
    "gray": "gray",
}
_VARIANT_COLORS = {"destructive": "red", "default": "blue", "secondary": "gray"}


def _colored(text: str, color: str) -> str:
    return f":{_ST_COLORS.get(color, 'gray')}[{text}]"


def _clock_value(text: str) -> time | None:
    return datetime.strptime(text, "%H:%M").time() if text else None


def _clock_text(value: time | None) -> str:
    return value.strftime("%H:%M") if value is not None else ""


def _init_state(st, settings: Settings) -> None:
    state = st.session_state
    if "store" not in state:
        state["store"] = build_store(settings)
    state.setdefault("planner_form", planner.PlannerForm())
    state.setdefault("timers", {})
    state.setdefault("energy_level", settings.default_energy)
    state.setdefault("anxiety_logging", False)
    state.setdefault("reflecting", False)
    if "auth" not in state:
        session = AuthSession()
        session.resolve(None)
        state["auth"] = session


def current_snapshot(st, settings: Settings) -> SessionSnapshot:
    """Session state from Streamlit's OIDC login when configured, else the local session."""

    if settings.auth_provider:
        if not st.user.is_logged_in:
            return SessionSnapshot(user=None, is_loading=False)
        email = str(getattr(st.user, "email", "") or "")
        name = str(getattr(st.user, "name", "") or email)
        return SessionSnapshot(user=User(id=email or name, name=name, email=email or None))
    return st.session_state["auth"].snapshot


def _sign_in(st, settings: Settings) -> None:
    logger.info("Sign-in requested via %s", settings.auth_provider or "local session")
    if settings.auth_provider:
        st.login(settings.auth_provider)
    else:
        st.session_state["auth"].login(User(id="local", name="Guest"))


def _sign_out(st, settings: Settings) -> None:
    if settings.auth_provider:
        st.logout()
    else:
        st.session_state["auth"].logout()


def render_header(st, settings: Settings, snapshot: SessionSnapshot) -> None:
    with st.sidebar:
        st.header("ADHD Personal OS")
        st.caption("Your productivity companion")
        energy = st.slider("Energy", min_value=0, max_value=100, key="energy_level")
        st.progress(dashboard.clamp_energy(energy) / 100, text=f"Energy: {energy}%")
        st.caption(f"Signed in as {snapshot.user.name}")
        if st.button("Sign out", key="sign_out"):
            _sign_out(st, settings)
            st.rerun()


def render_task(st, task, store) -> None:
    timers = st.session_state["timers"]
    with st.container(border=True):
        left, right = st.columns([5, 1])
        with left:
            done = st.checkbox(task.title, value=task.completed, key=f"done-{task.id}")
            if done != task.completed:
                store.toggle_complete(task.id)
                st.rerun()
            if task.description:
                st.caption(task.description)

            badges = [
                _colored(task.priority, _VARIANT_COLORS[estimates.priority_variant(task.priority)]),
                _colored(f"⚡ {task.energy_required}", estimates.energy_color(task.energy_required)),
            ]
            if task.category:
                badges.append(f"`{task.category}`")
            st.markdown(" ".join(badges))

            line = f"Est: {task.estimated_minutes}min"
            accuracy = estimates.estimate_accuracy(task.estimated_minutes, task.actual_minutes)
            if task.actual_minutes is not None:
                line += f" • Actual: {task.actual_minutes}min"
            if accuracy is not None:
                line += " " + _colored(f"({estimates.accuracy_label(task)})", estimates.accuracy_color(accuracy))
            st.markdown(line)

            progress = estimates.progress_value(task)
            if progress is not None:
                st.progress(progress / 100)

            actual = st.number_input(
                "Actual minutes",
                min_value=0,
                value=task.actual_minutes or 0,
                step=5,
                key=f"actual-{task.id}",
            )
            if st.button("Set actual time", key=f"set-actual-{task.id}"):
                store.set_actual_minutes(task.id, int(actual))
                st.rerun()
        with right:
            if not task.completed:
                running = timers.get(task.id, False)
                if st.button("Pause" if running else "Start", key=f"timer-{task.id}"):
                    st.session_state["timers"] = estimates.toggle_timer(timers, task.id)
                    st.rerun()


def render_dashboard(st, store, today: date) -> None:
    state = store.state
    main_col, side_col = st.columns([2, 1])
    with main_col:
        st.subheader("Today's Focus")
        st.caption(dashboard.today_heading(today, state.tasks))
        for task in state.tasks:
            render_task(st, task, store)

    with side_col:
        st.subheader("Weekly Progress")
        for row in dashboard.weekly_progress(seed.WEEKLY_STATS):
            st.progress(min(row["percent"], 100.0) / 100, text=f"{row['label']}: {row['text']}")

    st.subheader("Weekly Overview")
    grid = planner.build_week_grid(list(state.time_blocks), today, today=today)
    columns = st.columns(7)
    for column, day in zip(columns, grid.days):
        count = len(planner.blocks_for_date(list(state.time_blocks), day.date))
        column.metric(day.label, "Today" if day.is_today else f"{count} blocks")


def _render_block_form(st, store) -> None:
    form_state: planner.PlannerForm = st.session_state["planner_form"]
    draft = form_state.draft
    st.subheader(f"Add Time Block • {form_state.selected_date}")
    with st.form("add-block"):
        title = st.text_input("Title", value=draft.title, placeholder="What are you working on?")
        c1, c2 = st.columns(2)
        start_time = c1.time_input("Start Time", value=_clock_value(draft.start_time), step=900)
        end_time = c2.time_input("End Time", value=_clock_value(draft.end_time), step=900)
        c3, c4, c5 = st.columns(3)
        block_type = c3.selectbox("Type", BLOCK_TYPES, index=BLOCK_TYPES.index(draft.type))
        priority = c4.selectbox("Priority", LEVELS, index=LEVELS.index(draft.priority))
        energy = c5.selectbox("Energy", LEVELS, index=LEVELS.index(draft.energy_required))
        description = st.text_area("Description (Optional)", value=draft.description, height=68)
        add = st.form_submit_button("Add Block", type="primary")
        cancel = st.form_submit_button("Cancel")

    if cancel:
        st.session_state["planner_form"] = planner.close_form(form_state)
        st.rerun()
    if add:
        filled = replace(
            form_state,
            draft=planner.BlockDraft(
                title=title.strip(),
                start_time=_clock_text(start_time),
                end_time=_clock_text(end_time),
                type=block_type,
                priority=priority,
                energy_required=energy,
                description=description,
            ),
        )
        blocks, next_form = planner.submit_block(list(store.state.time_blocks), filled)
        store.replace_time_blocks(blocks)
        st.session_state["planner_form"] = next_form
        st.rerun()


def render_planner(st, store, today: date) -> None:
    reference = st.date_input("Week containing", value=today, key="planner_week")
    grid = planner.build_week_grid(list(store.state.time_blocks), reference, today=today)

    st.subheader("Weekly Planner")
    st.caption(f"{grid.heading} • ⚡ Energy-based scheduling • 20% buffer time included")

    if st.session_state["planner_form"].is_open:
        _render_block_form(st, store)

    header = st.columns(8)
    header[0].markdown("**Time**")
    for column, day in zip(header[1:], grid.days):
        label = f"**{day.label}** {date.fromisoformat(day.date).day}"
        column.markdown(_colored(label, "indigo") if day.is_today else label)

    for index, hour in enumerate(planner.SLOT_HOURS):
        row = st.columns(8)
        row[0].caption(planner.format_hour(hour))
        for column, day in zip(row[1:], grid.days):
            cell = day.cells[index]
            if cell.is_empty:
                if column.button("＋", key=f"slot-{cell.date}-{hour}"):
                    st.session_state["planner_form"] = planner.select_slot(
                        st.session_state["planner_form"], cell.date, hour
                    )
                    st.rerun()
                continue
            for block in cell.blocks:
                column.markdown(
                    _colored(f"**{block.title}**", planner.block_color(block.type, block.priority))
                    + f"  \n🕒 {block.start_time}-{block.end_time}"
                )


def render_anxiety(st, store) -> None:
    strategies = seed.coping_strategies()

    st.subheader("Anxiety Check-in")
    level = st.slider("How are you feeling right now? (1-10)", min_value=1, max_value=10, value=3, key="anxiety_level")
    st.markdown("Calm · " + _colored(f"Level {level}", anxiety.anxiety_color(level)) + " · Very Anxious")

    if anxiety.should_prompt_coping(level):
        st.warning("Elevated anxiety detected. Let's try a coping strategy to help you feel more centered.")
        if st.button("Start Coping Strategy"):
            st.session_state["anxiety_logging"] = True

    st.subheader("Coping Strategies")
    columns = st.columns(2)
    for position, strategy in enumerate(strategies):
        with columns[position % 2].container(border=True):
            st.markdown(
                _colored(f"**{strategy.name}**", anxiety.strategy_color(strategy.category))
                + f" · {strategy.time_required}min"
            )
            st.caption(strategy.description)
            st.progress(strategy.effectiveness / 100, text=f"Effectiveness {strategy.effectiveness}%")

    st.subheader("Recent Anxiety Events")
    for log in sorted(store.state.anxiety_logs, key=lambda item: item.timestamp, reverse=True):
        with st.container(border=True):
            st.markdown(
                f"**{log.trigger}** · {anxiety.priority_badge(log)} · "
                + _colored(f"Level {log.anxiety_level}", anxiety.anxiety_color(log.anxiety_level))
            )
            st.caption(f"{log.timestamp:%x} at {log.timestamp:%H:%M}")
            c1, c2 = st.columns(2)
            c1.markdown(f"**Strategy Used:** {log.coping_strategy}")
            c2.markdown(f"**Outcome:** {log.outcome}")

    if not st.session_state["anxiety_logging"]:
        return

    st.subheader("Log Anxiety Event")
    names = [strategy.name for strategy in strategies]
    with st.form("log-anxiety"):
        trigger = st.text_area("What triggered this anxiety?", placeholder="Describe what happened...")
        strategy_name = st.selectbox("Coping strategy used", names, index=None, placeholder="Select a strategy")
        outcome = st.text_area("How did it go?", placeholder="Describe the outcome...")
        maintained = st.checkbox("I was able to maintain my priorities")
        save = st.form_submit_button("Save Log", type="primary")
        cancel = st.form_submit_button("Cancel")

    if save:
        draft = anxiety.LogDraft(trigger, strategy_name or "", outcome, maintained)
        store.add_anxiety_log(anxiety.build_log(draft, level))
    if save or cancel:
        st.session_state["anxiety_logging"] = False
        st.rerun()


def render_reflection(st, store) -> None:
    head, action = st.columns([4, 1])
    head.subheader("Reflection Hub")
    head.caption("Analyze patterns and improve your productivity")
    if action.button("Daily Reflection"):
        st.session_state["reflecting"] = True

    insights_tab, analytics_tab, history_tab = st.tabs(["Insights", "Analytics", "History"])

    with insights_tab:
        st.markdown("**This Week's Overview**")
        columns = st.columns(4)
        for column, row in zip(columns, dashboard.reflection_overview(seed.REFLECTION_WEEKLY_STATS)):
            column.metric(row["label"], row["value"])
            column.progress(min(row["percent"], 100) / 100)

        summary = reflection.summarize(list(store.state.reflections))
        st.caption(
            f"Across {summary['days']} logged days: energy {summary['average_energy']}, "
            f"focus {summary['average_focus']}, anxiety {summary['average_anxiety']}"
        )

        for insight in seed.productivity_insights():
            with st.container(border=True):
                st.markdown(_colored(f"**{insight.title}**", reflection.insight_color(insight.type, insight.impact)))
                st.write(insight.description)
                tags = [f"`{insight.impact} impact`"]
                if insight.actionable:
                    tags.append("`Actionable`")
                st.markdown(" ".join(tags))

    with analytics_tab:
        st.info("Analytics coming soon...")

    with history_tab:
        for item in sorted(store.state.reflections, key=lambda r: r.date, reverse=True):
            with st.container(border=True):
                st.markdown(f"{reflection.mood_emoji(item.mood)} **{item.date}** · {item.mood}")
                c1, c2, c3 = st.columns(3)
                c1.metric("Energy", item.energy_level)
                c2.metric("Focus", item.focus_quality)
                c3.metric("Anxiety", item.anxiety_level)
                st.markdown(f"**Accomplishments:** {item.accomplishments}")
                st.markdown(f"**Challenges:** {item.challenges}")
                st.markdown(f"**Improvements:** {item.improvements}")

    if not st.session_state["reflecting"]:
        return

    defaults = reflection.ReflectionDraft()
    with st.form("daily-reflection"):
        st.markdown("**Daily Reflection**")
        energy = st.slider("Energy level", 1, 10, defaults.energy_level)
        focus = st.slider("Focus quality", 1, 10, defaults.focus_quality)
        anxiety_level = st.slider("Anxiety level", 1, 10, defaults.anxiety_level)
        mood = st.selectbox(
            "Mood",
            MOODS,
            index=MOODS.index(defaults.mood),
            format_func=lambda value: f"{reflection.mood_emoji(value)} {value}",
        )
        accomplishments = st.text_area("What did you accomplish today?")
        challenges = st.text_area("What challenges did you face?")
        improvements = st.text_area("What would you do differently?")
        save = st.form_submit_button("Save Reflection", type="primary")
        cancel = st.form_submit_button("Cancel")

    if save:
        draft = reflection.ReflectionDraft(
            energy, focus, anxiety_level, accomplishments, challenges, improvements, mood
        )
        store.add_reflection(reflection.build_reflection(draft))
    if save or cancel:
        st.session_state["reflecting"] = False
        st.rerun()


def render_gate(st, settings: Settings, view: str) -> None:
    if view == LOADING:
        st.info("Loading your workspace...")
        return
    st.title("ADHD Personal OS")
    st.write("Sign in to plan your week, track tasks and check in with yourself.")
    if st.button("Sign in", type="primary"):
        _sign_in(st, settings)
        st.rerun()


def main() -> None:
    import streamlit as st

    settings = load_settings()
    configure_logging(settings.log_level)
    st.set_page_config(page_title="ADHD Personal OS", layout="wide")

    try:
        _init_state(st, settings)
    except ValueError as exc:
        st.error(f"Could not load seed data: {exc}")
        return

    snapshot = current_snapshot(st, settings)
    view = gate_view(snapshot)
    if view in (LOADING, SIGNED_OUT):
        render_gate(st, settings, view)
        return

    store = st.session_state["store"]
    today = date.today()
    render_header(st, settings, snapshot)

    tabs: dict[str, Any] = dict(zip(dashboard.TABS, st.tabs(list(dashboard.TABS))))
    with tabs["Dashboard"]:
        render_dashboard(st, store, today)
    with tabs["Planner"]:
        render_planner(st, store, today)
    with tabs["Tracker"]:
        st.info(dashboard.PLACEHOLDER_TABS["Tracker"])
    with tabs["Reflection"]:
        render_reflection(st, store)
    with tabs["Anxiety"]:
        render_anxiety(st, store)


if __name__ == "__main__":
    main()
