import argparse

from deptboard.models.user_schemas import RoleEnum
from deptboard.services.bootstrap import ensure_user
from deptboard.services.repository import MongoRepository


def main():
    parser = argparse.ArgumentParser(description="Provision a dashboard login account.")
    parser.add_argument("username")
    parser.add_argument("password")
    parser.add_argument("--role", choices=[r.value for r in RoleEnum], default=RoleEnum.HOD.value)
    parser.add_argument("--department", default=None)
    parser.add_argument("--full-name", default=None)
    args = parser.parse_args()

    user_id = ensure_user(
        MongoRepository(),
        args.username,
        args.password,
        RoleEnum(args.role),
        department=args.department,
        full_name=args.full_name,
    )
    print(f"Account {args.username} ready (id {user_id})")


if __name__ == "__main__":
    main()
