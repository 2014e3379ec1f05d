"""Render settings entities."""

from __future__ import annotations

from dataclasses import dataclass

from template_data_docs.type_resolution import MISSING_TYPE_PLACEHOLDER

DEFAULT_TITLE = "Template Data"

DEFAULT_INTRO_PARAGRAPHS: tuple[str, ...] = (
    "The following settings can be used during a Habitat service's lifecycle. This means "
    "that you can use these settings in any of the plan hooks, such as `init`, or `run`, "
    "and also in any templatized configuration file for your application or service.",
    "These configuration settings are referenced using the "
    "[Handlebars.js](https://github.com/wycats/handlebars.js/) version of "
    "[Mustache-style](https://mustache.github.io/mustache.5.html) tags. For an example on "
    "how these settings are used in plan hooks, see "
    "[Add Health Monitoring to a Plan](/tutorials/sample-app/mac/add-health-check-hook/) "
    "in the Getting Started tutorial.",
)

DEFAULT_REFERENCE_HEADING = "Reference Objects"

DEFAULT_REFERENCE_INTRO = (
    "Some of the template expressions referenced above return objects of a specific shape; "
    "for example, the `svc.me` and `svc.first` expressions return \"service member\" "
    "objects, and the `pkg` property of a service member returns a \"package identifier\" "
    "object. These are defined below."
)


@dataclass(frozen=True)
class RenderSettings:
    """Fixed prose and placeholders used while assembling the reference document."""

    title: str = DEFAULT_TITLE
    intro_paragraphs: tuple[str, ...] = DEFAULT_INTRO_PARAGRAPHS
    reference_heading: str = DEFAULT_REFERENCE_HEADING
    reference_intro: str = DEFAULT_REFERENCE_INTRO
    missing_type_placeholder: str = MISSING_TYPE_PLACEHOLDER
