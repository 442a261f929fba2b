"""Application settings — delays and export options of the outer surfaces."""

from pydantic import BaseModel, Field


class AppSettings(BaseModel):
    """Runtime settings for the API and dashboard.

    The delays only simulate latency of a remote backend; nothing here
    influences the numbers.
    """

    calculation_delay_seconds: float = Field(
        default=0.8, ge=0,
        description="Simulated latency before a calculation is answered (s)",
    )
    email_delay_seconds: float = Field(
        default=1.5, ge=0,
        description="Simulated latency of the e-mail delivery stub (s)",
    )
    report_file_name: str = Field(
        default="wallbox-roi-analyse.pdf",
        description="Download name of the PDF report",
    )
    csv_file_name: str = Field(
        default="wallbox-roi-tabelle.csv",
        description="Download name of the yearly table export",
    )
