from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd
import pandera.pandas as pa
import regex
from kitchen_converter.measurement.models import Ingredient
from omegaconf import DictConfig, OmegaConf
from pandera.typing import DataFrame, Series
from structlog import get_logger

FILE_LOGGER = get_logger(__name__)


class IngredientSchema(pa.DataFrameModel):
    name: Series[str] = pa.Field(unique=True, nullable=False)
    # grams per milliliter
    density: Series[float] = pa.Field(gt=0, nullable=False, coerce=True)
    category: Series[str] = pa.Field(nullable=False)
    lookup_key: Series[str] = pa.Field(unique=True, nullable=False)

    class Config:
        strict = True
        coerce = True


def normalize_ingredient_name(name: str) -> str:
    return regex.sub(r"\s+", " ", name.strip()).casefold()


@dataclass
class IngredientCatalog:
    config: DictConfig
    dataframe: DataFrame[IngredientSchema] = field(init=False)

    def __post_init__(self):
        self.dataframe = self._load_ingredients()

    def get_ingredient(self, name: str) -> Optional[Ingredient]:
        mask = self.dataframe.lookup_key == normalize_ingredient_name(name)
        if not mask.any():
            FILE_LOGGER.warning(
                "[get ingredient]",
                warn="ingredient not in catalog",
                ingredient=name,
            )
            return None

        row = self.dataframe.loc[mask].iloc[0]
        return Ingredient(
            name=row["name"],
            density=float(row["density"]),
            category=row["category"],
        )

    def get_density(self, name: str) -> Optional[float]:
        ingredient = self.get_ingredient(name)
        if ingredient is None:
            return None
        return ingredient.density

    def get_names(self, category: str = None) -> List[str]:
        dataframe = self.dataframe
        if category is not None:
            mask = dataframe.category.str.casefold() == category.casefold()
            dataframe = dataframe.loc[mask]
        return dataframe["name"].tolist()

    def _load_ingredients(self) -> DataFrame[IngredientSchema]:
        dataframe = pd.DataFrame(
            OmegaConf.to_container(self.config.ingredients, resolve=True),
            columns=["name", "density", "category"],
        )
        dataframe["name"] = dataframe["name"].str.strip()
        dataframe["category"] = dataframe["category"].fillna("")
        dataframe["lookup_key"] = dataframe["name"].apply(
            normalize_ingredient_name
        )
        return IngredientSchema.validate(dataframe)
