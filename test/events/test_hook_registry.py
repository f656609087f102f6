import pytest

from linked_products.events.core.exceptions import InvalidHookCallbackError
from linked_products.events.core.hook import HookName
from linked_products.events.core.hook_registry import HookRegistry


def test_callbacks_run_by_priority_then_registration_order():
    hooks = HookRegistry()
    calls: list[str] = []

    hooks.add_action(HookName.FOOTER_SCRIPTS, lambda: calls.append("late"), 20, name="late")
    hooks.add_action(HookName.FOOTER_SCRIPTS, lambda: calls.append("first"), name="first")
    hooks.add_action(HookName.FOOTER_SCRIPTS, lambda: calls.append("second"), name="second")
    hooks.add_action(HookName.FOOTER_SCRIPTS, lambda: calls.append("early"), 5, name="early")

    hooks.do_action(HookName.FOOTER_SCRIPTS)

    assert calls == ["early", "first", "second", "late"]


def test_apply_filters_chains_values_and_passes_extra_arguments():
    hooks = HookRegistry()
    seen: list[str] = []

    def double(value, context):
        seen.append(context)
        return value * 2

    hooks.add_filter(HookName.CROSS_SELLS_COLUMN_COUNT, double)
    hooks.add_filter(HookName.CROSS_SELLS_COLUMN_COUNT, lambda value, context: value + 1, 11)

    assert hooks.apply_filters(HookName.CROSS_SELLS_COLUMN_COUNT, 2, "ctx") == 5
    assert seen == ["ctx"]


def test_apply_filters_without_callbacks_returns_value():
    hooks = HookRegistry()
    value = object()

    assert hooks.apply_filters("nothing_attached", value) is value


def test_enum_and_string_hook_names_are_the_same_hook():
    hooks = HookRegistry()
    hooks.add_filter("gettext", lambda text, original, domain: text.upper())

    assert hooks.apply_filters(HookName.GETTEXT, "abc", "abc", "storefront") == "ABC"


def test_remove_by_callable_or_name_is_idempotent():
    hooks = HookRegistry()

    def callback():
        return None

    hooks.add_action(HookName.AFTER_SINGLE_PRODUCT_SUMMARY, callback, 15)
    hooks.add_action(HookName.AFTER_SINGLE_PRODUCT_SUMMARY, lambda: None, 15, name="upsell_display")

    assert hooks.remove_action(HookName.AFTER_SINGLE_PRODUCT_SUMMARY, callback, 15) is True
    assert hooks.remove_action(HookName.AFTER_SINGLE_PRODUCT_SUMMARY, callback, 15) is False
    # wrong priority leaves the callback attached
    assert hooks.remove_action(HookName.AFTER_SINGLE_PRODUCT_SUMMARY, "upsell_display", 10) is False
    assert hooks.has_action(HookName.AFTER_SINGLE_PRODUCT_SUMMARY, "upsell_display")
    assert hooks.remove_action(HookName.AFTER_SINGLE_PRODUCT_SUMMARY, "upsell_display", 15) is True
    assert not hooks.has_action(HookName.AFTER_SINGLE_PRODUCT_SUMMARY)


def test_bound_methods_can_be_removed_with_a_fresh_reference():
    class Listener:
        def on_footer(self):
            return None

    hooks = HookRegistry()
    listener = Listener()
    hooks.add_action(HookName.FOOTER_SCRIPTS, listener.on_footer)

    assert hooks.remove_action(HookName.FOOTER_SCRIPTS, listener.on_footer) is True


def test_do_action_skips_suppressed_callbacks_without_removing_them():
    hooks = HookRegistry()
    calls: list[str] = []
    hooks.add_action(HookName.AFTER_SINGLE_PRODUCT_SUMMARY, lambda: calls.append("upsells"), 15, name="upsell_display")
    hooks.add_action(
        HookName.AFTER_SINGLE_PRODUCT_SUMMARY, lambda: calls.append("cross-sells"), 15, name="cross_sell_display"
    )

    hooks.do_action(HookName.AFTER_SINGLE_PRODUCT_SUMMARY, skip={("cross_sell_display", 15)})
    hooks.do_action(HookName.AFTER_SINGLE_PRODUCT_SUMMARY)

    assert calls == ["upsells", "upsells", "cross-sells"]


def test_non_callable_callbacks_are_rejected():
    hooks = HookRegistry()

    with pytest.raises(InvalidHookCallbackError):
        hooks.add_filter(HookName.GETTEXT, "not callable")

    with pytest.raises(TypeError):
        hooks.add_action(HookName.FOOTER_SCRIPTS, None)


def test_callback_errors_propagate():
    hooks = HookRegistry()

    def failing():
        raise RuntimeError("boom")

    hooks.add_action(HookName.FOOTER_SCRIPTS, failing)

    with pytest.raises(RuntimeError, match="boom"):
        hooks.do_action(HookName.FOOTER_SCRIPTS)
