# pylint: disable=c-extension-no-member
from dependency_injector import containers, providers

from encore_assets.dependency_injection.config import build_file_path
from encore_assets.services.encore_helper import EncoreHelper
from encore_assets.services.html_helper import MarkupHtmlHelper
from encore_assets.services.manifest_loader import load_entrypoints, load_manifest
from encore_assets.services.template_service import TemplateService


class Services(containers.DeclarativeContainer):
    config = providers.Configuration()

    entrypoints_path = providers.Callable(
        build_file_path,
        config.encore.entrypoints_path,
        config.app.web_root,
        "entrypoints.json",
    )

    manifest_path = providers.Callable(
        build_file_path,
        config.encore.manifest_path,
        config.app.web_root,
        "manifest.json",
    )

    html_helper = providers.Factory(
        MarkupHtmlHelper,
        asset_base_url=config.encore.asset_base_url.as_(lambda value: value or "/"),
    )

    # a fresh helper, freshly loaded build files, for every render
    encore_helper = providers.Factory(
        EncoreHelper,
        html_helper=html_helper,
        entrypoints=providers.Callable(load_entrypoints, entrypoints_path),
        manifest=providers.Callable(load_manifest, manifest_path),
    )

    template_service = providers.Singleton(
        TemplateService,
        jinja_template_directory=config.templates.jinja_path,
        encore_helper_factory=encore_helper.provider,
    )
