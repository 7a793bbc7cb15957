"""
Export of assembled campaigns into parquet tables.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
import logging

import polars as pl

from ..entities import Benefit, Campaign, Entity, Goal, Tier
from ..utils.types import create_table_schema, to_cell

logger = logging.getLogger(__name__)

# Child tables keyed by campaign_id: (table name, relationship name, entity class)
CHILD_TABLES = [
    ("tiers", "tiers", Tier),
    ("benefits", "benefits", Benefit),
    ("goals", "goals", Goal),
]


class CampaignExporter:
    """
    Flattens campaigns and their tiers, benefits and goals into DataFrames.

    Produces one ``campaigns`` table plus one table per child resource,
    each child row carrying the id of the campaign it was reached from.
    """

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = Path(output_dir or "./data")

    def to_frames(self, campaigns: Sequence[Campaign]) -> Dict[str, pl.DataFrame]:
        """
        Transform campaigns into DataFrames.

        Args:
            campaigns: Assembled campaigns

        Returns:
            Dictionary mapping table names to DataFrames
        """
        campaign_schema = create_table_schema(Campaign.attributes_model, {"id": pl.Utf8})
        dataframes = {
            "campaigns": pl.DataFrame(
                [self._row(campaign) for campaign in campaigns], schema=campaign_schema
            )
        }

        for table_name, relationship, entity_cls in CHILD_TABLES:
            schema = create_table_schema(
                entity_cls.attributes_model, {"id": pl.Utf8, "campaign_id": pl.Utf8}
            )
            rows = []
            for campaign in campaigns:
                for child in getattr(campaign, relationship) or []:
                    rows.append(self._row(child, campaign_id=campaign.id))
            dataframes[table_name] = pl.DataFrame(rows, schema=schema)

        logger.info(f"Transformed data: {', '.join([f'{len(df)} {name}' for name, df in dataframes.items()])}")
        return dataframes

    def save_parquet(
        self,
        dataframes: Dict[str, pl.DataFrame],
        timestamp_suffix: bool = True
    ) -> List[Path]:
        """
        Save DataFrames to parquet files.

        Args:
            dataframes: Table name to DataFrame mapping
            timestamp_suffix: Whether to add timestamp to filenames

        Returns:
            Paths of created parquet files
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        output_files = []
        for table_name, df in dataframes.items():
            filename = table_name
            if timestamp_suffix:
                timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
                filename = f"{filename}_{timestamp}"

            filepath = self.output_dir / f"{filename}.parquet"
            logger.info(f"Saving {len(df)} rows to {filepath}")
            df.write_parquet(filepath)
            output_files.append(filepath)

        return output_files

    def process_to_parquet(
        self,
        campaigns: Sequence[Campaign],
        timestamp_suffix: bool = True
    ) -> List[Path]:
        """Flatten campaigns and write every table to parquet."""
        return self.save_parquet(self.to_frames(campaigns), timestamp_suffix)

    @staticmethod
    def _row(entity: Entity, **keys: Any) -> Dict[str, Any]:
        row: Dict[str, Any] = {"id": entity.id, **keys}
        for field_name in entity.attributes_model.model_fields:
            row[field_name] = to_cell(getattr(entity.attributes, field_name))
        return row
