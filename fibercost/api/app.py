"""FastAPI application - create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from fibercost.exceptions import InvalidInputError, RateReferenceError
from fibercost.models.base import ValueRecord
from fibercost.models.catalog import LaborRate, MileageRate, Unit  # noqa: TCH001 (FastAPI resolves at runtime)
from fibercost.models.project import (
    GlobalAssumptions,
    Project,
    ProjectLaborRate,
    ProjectMileageRate,
    ProjectUnit,
)

if TYPE_CHECKING:
    from fibercost.engine import ProjectEstimator
    from fibercost.models.results import ProjectEstimate

logger = logging.getLogger(__name__)


class EstimateRequest(ValueRecord):
    """Body of POST /api/estimate; omitted catalogs and assumptions use defaults."""

    project: Project
    units: list[Unit] | None = None
    labor_rates: list[LaborRate] | None = None
    mileage_rates: list[MileageRate] | None = None
    assumptions: GlobalAssumptions | None = None


def _estimate_payload(estimate: ProjectEstimate) -> dict[str, Any]:
    return {
        "estimate": estimate.model_dump(mode="json", by_alias=True),
        "summary_dict": estimate.to_summary_dict(),
    }


def create_app(
    *,
    estimator: ProjectEstimator | None = None,
    assumptions: GlobalAssumptions | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    estimator
        Optional pre-built estimator for dependency injection (e.g. tests).
        If not provided, one is created via create_default_estimator on first
        request.
    assumptions
        Global assumptions for the lazily created estimator. When omitted they
        are read from the environment. Ignored when ``estimator`` is given.
    """
    app = FastAPI(title="fibercost", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own
    app.state.estimator = estimator
    app.state.assumptions = assumptions

    def _get_estimator() -> ProjectEstimator:
        est: ProjectEstimator | None = app.state.estimator
        if est is not None:
            return est
        from fibercost.factory import create_default_estimator

        est = create_default_estimator(app.state.assumptions)
        app.state.estimator = est
        return est

    def _run_estimate(request: EstimateRequest) -> ProjectEstimate:
        try:
            return _get_estimator().estimate(
                request.project,
                assumptions=request.assumptions,
                units=request.units,
                labor_rates=request.labor_rates,
                mileage_rates=request.mileage_rates,
            )
        except RateReferenceError as exc:
            logger.warning("Dangling %s selection '%s'", exc.category, exc.rate_id)
            raise HTTPException(
                status_code=422,
                detail={
                    "error": "unknown_rate",
                    "message": str(exc),
                    "category": exc.category,
                    "rate_id": exc.rate_id,
                },
            ) from exc
        except InvalidInputError as exc:
            logger.warning("Rejected estimate input: %s", exc)
            raise HTTPException(
                status_code=422,
                detail={
                    "error": "invalid_input",
                    "message": str(exc),
                    "field": exc.field,
                },
            ) from exc

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": "0.1.0"}

    # ------------------------------------------------------------------
    # GET /api/catalog
    # ------------------------------------------------------------------

    @app.get("/api/catalog")
    def catalog() -> dict[str, Any]:
        units, labor_rates, mileage_rates = _get_estimator().repository.catalogs()
        return {
            "units": [u.model_dump(mode="json", by_alias=True) for u in units],
            "laborRates": [r.model_dump(mode="json", by_alias=True) for r in labor_rates],
            "mileageRates": [r.model_dump(mode="json", by_alias=True) for r in mileage_rates],
        }

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(request: EstimateRequest) -> dict[str, Any]:
        return _estimate_payload(_run_estimate(request))

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        sample_project = Project(
            name="Cedar Ridge Extension",
            notes="Sample rural buildout: 1.2 miles of underground plant.",
            homes_passed=120,
            current_customers=30,
            selected_units=[
                ProjectUnit(unit_id="fiber-144ct", quantity=6300),
                ProjectUnit(unit_id="conduit-1-25", quantity=6300),
                ProjectUnit(unit_id="directional-bore", quantity=1800),
                ProjectUnit(unit_id="handhole", quantity=14),
                ProjectUnit(unit_id="splice-closure", quantity=6),
            ],
            selected_labor_rates=[
                ProjectLaborRate(labor_rate_id="bore-crew", quantity=40),
                ProjectLaborRate(labor_rate_id="splicer", quantity=24),
            ],
            selected_mileage_rates=[
                ProjectMileageRate(mileage_rate_id="trip-50", trips=20),
            ],
        )
        return _estimate_payload(_run_estimate(EstimateRequest(project=sample_project)))

    return app
