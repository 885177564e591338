"""Shared pytest fixtures: sample orchestrator action sources."""

import pytest

WIDGET_SOURCE = """\
/**
 * A widget that counts things.
 * @class
 * @param {number} count - item count
 */
function Widget(count) {
    this.count = count;

    /**
     * Reset the counter.
     * @public
     */
    this.reset = function () {
        this.count = 0;
    };
}

Widget.prototype = Object.create(Base.prototype);

/**
 * Increment the counter.
 * @param {number} [step] - how much to add
 * @returns {number} - the new count
 */
Widget.prototype.increment = function (step) {
    this.count += step || 1;
    return this.count;
};

/**
 * Describe the widget.
 * @private
 */
Widget.prototype.describe = function () {
    return "Widget(" + this.count + ")";
};
"""

ACTION_SOURCE = """\
/**
 * Look up a virtual machine by name.
 * @private
 * @param {string} name - VM name
 * @returns {VC:VirtualMachine} - the matching VM
 */
(function (name) {
    return Server.findAllForType("VC:VirtualMachine", name)[0];
});
"""


@pytest.fixture
def widget_source():
    return WIDGET_SOURCE


@pytest.fixture
def action_source():
    return ACTION_SOURCE


@pytest.fixture
def source_tree(tmp_path):
    """A small src/main/resources tree with one class and two flat actions."""
    root = tmp_path / "src" / "main" / "resources"
    widgets = root / "com" / "acme" / "widgets"
    vms = root / "com" / "acme" / "vms"
    widgets.mkdir(parents=True)
    vms.mkdir(parents=True)

    (widgets / "Widget.js").write_text(WIDGET_SOURCE)
    (vms / "findVm.js").write_text(ACTION_SOURCE)
    (vms / "powerOn.js").write_text(
        "/**\n * Power on a VM.\n * @param {VC:VirtualMachine} vm - target\n */\n"
        "(function (vm) {\n    vm.powerOnVM_Task();\n});\n"
    )
    return root
