import re
import logging
from typing import Any, Dict

from configs.database import Database


logger = logging.getLogger(__name__)

SQL_ERROR_SUGGESTION = "Check your SQL syntax and database connection"

CONNECTION_CHECK_QUERY = "SELECT NOW() AS server_time, version() AS version"

_LEADING_KEYWORD = re.compile(r"\s*([A-Za-z]+)")


class DatabaseService:

    @staticmethod
    def statement_verb(sql: str) -> str:
        """Leading keyword of a SQL statement, lower-cased ("" when there is none)."""
        match = _LEADING_KEYWORD.match(sql or "")
        return match.group(1).lower() if match else ""

    @staticmethod
    async def execute_sql(sql: str, database: Database) -> Dict[str, Any]:
        """
        Execute one SQL statement on a fresh connection and describe the result.

        The result shape depends on the statement's leading keyword:
        select returns rows and rowCount, insert returns a message and the first
        returned id, anything else returns a message and the command verb.
        Failures never raise; they come back with success=False.

        Args:
            sql: SQL statement to execute
            database: Database handing out the connection

        Returns:
            Result record for the calling agent
        """
        verb = DatabaseService.statement_verb(sql)
        logger.info(f"Executing SQL statement ({verb or 'unknown'}): {sql[:100]}")

        try:
            async with database.connect() as connection:
                # exec_driver_sql keeps ":name" text in the statement away from bind parsing
                result = await connection.exec_driver_sql(sql)
                returned = [dict(row) for row in result.mappings().all()] if result.returns_rows else []
                affected = len(returned) if result.returns_rows else max(result.rowcount or 0, 0)
                await connection.commit()

            if verb == "select":
                logger.info(f"Query returned {len(returned)} rows")
                return {
                    "success": True,
                    "rows": returned,
                    "rowCount": len(returned),
                }

            if verb == "insert":
                inserted_id = returned[0].get("id") if returned else None
                logger.info(f"Inserted {affected} row(s), id: {inserted_id}")
                return {
                    "success": True,
                    "message": f"Inserted {affected} row(s)",
                    "insertedId": inserted_id,
                }

            logger.info(f"{verb.upper()} affected {affected} row(s)")
            return {
                "success": True,
                "message": f"Command executed successfully. Affected {affected} row(s)",
                "command": verb.upper(),
            }

        except Exception as e:
            logger.error(f"SQL statement failed: {str(e)}")
            return {
                "success": False,
                "error": str(e),
                "suggestion": SQL_ERROR_SUGGESTION,
            }

    @staticmethod
    async def test_connection(database: Database) -> Dict[str, Any]:
        """Run a diagnostic query and report server time and version."""
        try:
            async with database.connect() as connection:
                result = await connection.exec_driver_sql(CONNECTION_CHECK_QUERY)
                row = result.mappings().one()

            version = str(row["version"] or "")
            logger.info(f"Database connection test succeeded: {version[:60]}")
            return {
                "success": True,
                "message": "Database connection successful",
                "server_time": row["server_time"],
                "postgres_version": version.split(" ")[0],
            }

        except Exception as e:
            logger.error(f"Database connection test failed: {str(e)}")
            return {
                "success": False,
                "error": str(e),
            }
