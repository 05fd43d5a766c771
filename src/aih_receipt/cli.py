"""CLI for receipt generation."""

import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from aih_receipt.generator import RenderError, generate_receipt, receipt_filename
from aih_receipt.images import logo_data_url
from aih_receipt.models import ReceiptJob
from aih_receipt.validation import validate_cad_sus, validate_mobile_phone

CONFIG_DIR = Path(__file__).parent.parent.parent / "config"
DEFAULT_OUTPUT_DIR = Path(__file__).parent.parent.parent / "output"

log = logging.getLogger(__name__)


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


def load_job(job_file: Path) -> ReceiptJob:
    """Read a YAML job file, resolving a logo path relative to it."""
    with open(job_file) as f:
        job_data = yaml.safe_load(f) or {}

    try:
        job = ReceiptJob(**job_data)
    except ValidationError as e:
        raise click.ClickException(f"{job_file}: {e}") from e

    if job.logo and not job.logo.startswith("data:"):
        logo_path = job_file.parent / job.logo
        if not logo_path.is_file():
            raise click.ClickException(f"{job_file}: logo not found: {logo_path}")
        job.logo = logo_data_url(logo_path)
    return job


def render_job(job_file: Path, output_dir: Path) -> Path:
    """Render one job file into output_dir and return the written path."""
    job = load_job(job_file)
    patient = job.patient

    if not validate_cad_sus(patient.cad_sus):
        log.warning("[CLI] %s: CadSUS %s is not a valid CPF or CNS", job_file.name, patient.cad_sus)
    if patient.phone and validate_mobile_phone(patient.phone) is None:
        log.warning("[CLI] %s: phone %s is not a mobile number", job_file.name, patient.phone)

    try:
        data = generate_receipt(patient, job.document, job.logo)
    except RenderError as e:
        raise click.ClickException(f"{job_file}: could not render receipt: {e}") from e

    output_path = output_dir / receipt_filename(patient)
    output_path.write_bytes(data)
    return output_path


@click.command()
@click.argument("job_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o", "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_OUTPUT_DIR,
    help="Output directory for the generated receipt",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress information")
def generate_receipt_cmd(job_file: Path, output_dir: Path, verbose: bool):
    """Generate a delivery receipt from a YAML job file."""
    _setup_logging(verbose)
    output_dir.mkdir(parents=True, exist_ok=True)

    output_path = render_job(job_file, output_dir)
    click.echo(f"Generated: {output_path}")


@click.command()
@click.option(
    "-c", "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=CONFIG_DIR,
    help="Directory holding YAML job files",
)
@click.option(
    "-o", "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_OUTPUT_DIR,
    help="Output directory for the generated receipts",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress information")
def generate_all(config_dir: Path, output_dir: Path, verbose: bool):
    """Generate receipts for every job file in a directory."""
    _setup_logging(verbose)
    output_dir.mkdir(parents=True, exist_ok=True)

    job_files = sorted(config_dir.glob("*.yaml"))
    if not job_files:
        click.echo(f"No job files found in {config_dir}")
        return

    for job_file in job_files:
        click.echo(f"Processing: {job_file.name}")
        output_path = render_job(job_file, output_dir)
        click.echo(f"  -> {output_path}")

    click.echo(f"\nGenerated {len(job_files)} receipts in {output_dir}")


if __name__ == "__main__":
    generate_all()
