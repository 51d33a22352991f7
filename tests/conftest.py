"""
Shared fixtures for atlassian-adf tests.

Provides ADF documents in the shapes Jira and Confluence return them, and
keeps logger configuration done by the CLI from leaking between tests.
"""

import logging

import pytest

from tests.utils.factories import ADFFactory


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handler and propagation changes made by setup_logger."""
    yield
    logger = logging.Logger.manager.loggerDict.get("atlassian-adf")
    if isinstance(logger, logging.Logger):
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def adf():
    """The raw ADF node factory."""
    return ADFFactory


@pytest.fixture
def ordered_list_doc():
    """Document with a two-item ordered list."""
    return ADFFactory.document(ADFFactory.ordered_list("First item", "Second item"))


@pytest.fixture
def code_block_doc():
    """Document with a javascript code block."""
    return ADFFactory.document(
        ADFFactory.node(
            "codeBlock",
            ADFFactory.text('console.log("hello");'),
            language="javascript",
        )
    )


@pytest.fixture
def jira_description():
    """A realistic Jira Cloud issue description."""
    return ADFFactory.document(
        ADFFactory.heading(2, ADFFactory.text("Steps to reproduce")),
        ADFFactory.node(
            "orderedList",
            ADFFactory.list_item(ADFFactory.paragraph(ADFFactory.text("Open the board"))),
            ADFFactory.list_item(
                ADFFactory.paragraph(
                    ADFFactory.text("Click "), ADFFactory.text("Create", "strong")
                )
            ),
        ),
        ADFFactory.paragraph(
            ADFFactory.text("See "),
            ADFFactory.link("the docs", "https://example.com"),
            ADFFactory.hard_break(),
            ADFFactory.text("Thanks"),
        ),
        ADFFactory.node(
            "blockquote", ADFFactory.paragraph(ADFFactory.text("Reported by support"))
        ),
    )
