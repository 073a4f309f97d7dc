from __future__ import annotations

from flask import Flask, jsonify

from ..common.validators import optional_int
from ..common.web import api_errors, current_identity, json_body, role_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    manager_required = role_required(container.token_service, Role.MANAGER)

    @app.route("/manager/submitReview", methods=["POST"], endpoint="submit_review")
    @api_errors("Server error")
    @manager_required
    def submit_review():
        body = json_body()
        review = container.review_service.submit_review(
            current_role=current_identity().role,
            employee_id=body.get("employeeId"),
            review_text=body.get("reviewText"),
            rating=body.get("rating"),
            tasks_completed=body.get("tasksCompleted"),
        )
        return jsonify({"message": "Performance review submitted successfully", "review": review.to_dict()})

    @app.route("/manager/allReviews", methods=["GET"], endpoint="all_reviews")
    @api_errors("Failed to fetch reviews")
    @manager_required
    def all_reviews():
        views = container.review_service.list_reviews(current_role=current_identity().role)
        return jsonify([v.to_dict() for v in views])

    @app.route("/manager/updateReview/<review_id>", methods=["PUT"], endpoint="update_review")
    @api_errors("Server error")
    @manager_required
    def update_review(review_id: str):
        body = json_body()
        review = container.review_service.update_review(
            current_role=current_identity().role,
            review_id=review_id,
            tasks_completed=body.get("tasksCompleted"),
            average_rating=body.get("averageRating"),
            remarks=body.get("remarks"),
            expected_revision=optional_int(body.get("revision"), "Revision"),
        )
        return jsonify({"message": "Review updated successfully", "review": review.to_dict()})
