"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and keeps user-level config out of every test.
"""

import logging
import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of picklejar modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("picklejar"):
        del sys.modules[module_name]


CSHARP_STEPS = """\
using TechTalk.SpecFlow;

[Binding]
public class ShoppingSteps
{
    [Given(@"I have (\\d+) items in my basket")]
    public void GivenIHaveItems(int count)
    {
    }

    [When(@"I remove (.*) from the basket")]
    public void WhenIRemove(string product)
    {
    }

    [Then(@"the basket total is (.*)")]
    public void ThenTotalIs(decimal total)
    {
    }
}
"""

JS_STEPS = """\
const { Given, When, Then } = require('@cucumber/cucumber');

Given('a cart with {int} products',
  function (productCount) {
    this.count = productCount;
  });

When('I add the product {string}',
  async function (productName) {
    this.added = productName;
  });

Then(/^the cart has (\\d+) items?$/, function () {
  this.checked = true;
});
"""


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide the real global config and PICKLEJAR__* env vars."""
    global_dir = tmp_path_factory.mktemp("global-config")
    monkeypatch.setattr(
        "picklejar.config.loader.GLOBAL_CONFIG_PATH", global_dir / "config.yaml"
    )
    for key in list(os.environ):
        if key.upper().startswith("PICKLEJAR__"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers bound to streams of a finished CliRunner invocation."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Workspace with one SpecFlow and one Cucumber.js step file."""
    root = tmp_path / "workspace"

    cs_file = root / "Specs" / "Steps" / "ShoppingSteps.cs"
    cs_file.parent.mkdir(parents=True)
    cs_file.write_text(CSHARP_STEPS)

    js_file = root / "features" / "step_definitions" / "cart.steps.js"
    js_file.parent.mkdir(parents=True)
    js_file.write_text(JS_STEPS)

    # Excluded by the default patterns
    vendored = root / "node_modules" / "shared" / "vendor.steps.js"
    vendored.parent.mkdir(parents=True)
    vendored.write_text("Given('a vendored step', function () {});\n")

    # Not a step file
    (root / "README.md").write_text("Given('not scanned')\n")

    return root
