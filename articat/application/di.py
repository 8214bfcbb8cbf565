from dishka import Container, Provider, from_context, make_container, provide

from articat.application.catalog import Catalog
from articat.config import Config
from articat.domain.article.util.di import ArticleProvider
from articat.infrastructure.memory import MemoryProvider
from articat.util.di.scope import Scope


class ApplicationProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)
    catalog = provide(Catalog, scope=Scope.UOW)


def create_container(config: Config | None = None) -> Container:
    """Build the process container; it owns the one article store.

    Resolve a Catalog per unit of interaction::

        container = create_container()
        with container() as uow:
            catalog = uow.get(Catalog)
    """
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    return make_container(
        ApplicationProvider(),
        MemoryProvider(),
        ArticleProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
